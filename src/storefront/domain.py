"""Domain initialization and configuration.

Products, users and orders share one domain so that order placement can
change an Order and the Products it draws stock from inside a single
unit of work.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging(log_file_prefix="storefront")

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
storefront = Domain(name="storefront")
