"""Find-or-create a customer by email, as used at checkout."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.identity.user import User, UserRole
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="User")
class ResolveUser:
    """Return the user owning an email address, creating a customer if there is none."""

    email: String(required=True, max_length=254)
    name: String(required=True, max_length=255)


@storefront.command_handler(part_of=User)
class ResolveUserHandler:
    @handle(ResolveUser)
    def resolve_user(self, command):
        repo = current_domain.repository_for(User)
        existing = repo.find_by_email(command.email)
        if existing is not None:
            return str(existing.id)

        user = User.register(email=command.email, name=command.name, role=UserRole.CUSTOMER.value)
        repo.add(user)
        logger.info("customer_created", user_id=str(user.id))
        return str(user.id)


def resolve_user(email, name) -> str:
    """Resolve ``email`` to a user id.

    Two checkouts racing on the same new address can both miss the lookup;
    the loser's insert trips the unique email constraint and its unit of work
    rolls back. A failed insert is answered by looking the address up again;
    if nobody owns it the original error stands.
    """
    try:
        return current_domain.process(ResolveUser(email=email, name=name), asynchronous=False)
    except ValidationError:
        existing = current_domain.repository_for(User).find_by_email(email)
        if existing is None:
            raise
        logger.info("customer_resolved_after_conflict", user_id=str(existing.id))
        return str(existing.id)
