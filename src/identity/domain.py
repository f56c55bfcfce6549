"""Identity bounded context — customer accounts and their address books."""

from protean.domain import Domain

from identity.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

logger = get_logger(__name__)

identity = Domain(name="identity")
