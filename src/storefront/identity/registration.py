"""User registration: command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.identity.user import User, UserRole


@storefront.command(part_of="User")
class RegisterUser:
    """Create a user with a previously unseen email address."""

    email: String(required=True, max_length=254)
    name: String(required=True, max_length=255)
    role: String(max_length=20, default=UserRole.CUSTOMER.value)


@storefront.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)
        if repo.find_by_email(command.email) is not None:
            raise ValidationError({"email": ["A user with this email already exists"]})

        user = User.register(email=command.email, name=command.name, role=command.role)
        repo.add(user)
        return str(user.id)
