"""
Script to create a portal user with a salted password hash.
"""
import asyncio
import re
import sys
import click

from hrms.database import async_session_factory
from hrms.repositories.activity_repository import ActivityRepository
from hrms.repositories.employee_repository import EmployeeRepository
from hrms.repositories.session_repository import SessionRepository
from hrms.repositories.user_repository import UserRepository
from hrms.core.exceptions import UserAlreadyExistsError
from hrms.core.security import hash_password
from hrms.models.enums import UserRoleEnum
from hrms.services.activity_service import ActivityService
from hrms.services.auth_service import AuthService


def validate_password(password: str) -> tuple[bool, str]:
    """
    Validate password strength.

    Returns:
        Tuple of (is_valid, error_message)
    """
    if len(password) < 8:
        return False, "Password must be at least 8 characters long"

    if not re.search(r"[A-Z]", password):
        return False, "Password must contain at least one uppercase letter"

    if not re.search(r"[a-z]", password):
        return False, "Password must contain at least one lowercase letter"

    if not re.search(r"\d", password):
        return False, "Password must contain at least one digit"

    return True, ""


async def create_user(
    email: str,
    password: str,
    role: str,
    must_change_password: bool = False,
    force: bool = False
):
    """
    Create a user, or reset an existing one when ``force`` is set.

    Args:
        email: Login email
        password: Plain text password
        role: Role name stored on the user
        must_change_password: Flag the account for a password change
        force: Reset password, role and lockout of an existing user
    """
    async with async_session_factory() as session:
        try:
            user_repo = UserRepository(session)
            auth_service = AuthService(
                user_repository=user_repo,
                session_repository=SessionRepository(session),
                employee_repository=EmployeeRepository(session),
                activity_service=ActivityService(ActivityRepository(session)),
            )

            try:
                user = await auth_service.create_user(
                    email=email,
                    password=password,
                    role=role,
                    must_change_password=must_change_password,
                )
                click.echo(f"✓ Created user: {email}")
            except UserAlreadyExistsError:
                if not force:
                    click.echo(f"✗ User '{email}' already exists. Use --force to reset it.", err=True)
                    sys.exit(1)

                user = await user_repo.get_by_email(email)
                password_hash, salt = hash_password(password)
                user.password_hash = password_hash
                user.salt = salt
                user.role = role
                user.is_active = True
                user.must_change_password = must_change_password
                await user_repo.reset_failed_logins(user)
                click.echo(f"✓ Reset user: {email}")

            await session.commit()

            click.echo("\nUser Details:")
            click.echo(f"  ID: {user.id}")
            click.echo(f"  Email: {user.email}")
            click.echo(f"  Role: {user.role}")
            click.echo(f"  Must change password: {'Yes' if user.must_change_password else 'No'}")

        except Exception as e:
            await session.rollback()
            click.echo(f"✗ Error creating user: {e}", err=True)
            sys.exit(1)


@click.command()
@click.option("--email", prompt=True, help="Login email address")
@click.option(
    "--password",
    prompt=True,
    hide_input=True,
    confirmation_prompt=True,
    help="Password"
)
@click.option(
    "--role",
    type=click.Choice([role.value for role in UserRoleEnum], case_sensitive=False),
    default=UserRoleEnum.EMPLOYEE.value,
    show_default=True,
    help="Portal role"
)
@click.option("--must-change-password", is_flag=True, help="Require a password change at next login")
@click.option("--force", is_flag=True, help="Reset the user if it already exists")
def main(email: str, password: str, role: str, must_change_password: bool, force: bool):
    """Create a portal user."""
    is_valid, error_msg = validate_password(password)
    if not is_valid:
        click.echo(f"✗ {error_msg}", err=True)
        sys.exit(1)

    canonical_role = next(r.value for r in UserRoleEnum if r.value.lower() == role.lower())

    click.echo("Creating user...")
    asyncio.run(create_user(email, password, canonical_role, must_change_password, force))


if __name__ == "__main__":
    main()
