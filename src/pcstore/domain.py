"""Domain composition root for the PC components store.

A single domain hosts the catalogue, identity and ordering aggregates so that
order placement (user, cart items, products, order) commits as one unit of work.
"""

from protean.domain import Domain

from pcstore.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

store = Domain(name="pcstore")
