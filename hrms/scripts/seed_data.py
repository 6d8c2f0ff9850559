"""
Script to seed reference data: activity types, dashboard tiles, quick
actions and the default menu with per-role permissions.
"""
import asyncio
import sys
import click

from hrms.database import async_session_factory
from hrms.repositories.activity_repository import ActivityRepository
from hrms.repositories.dashboard_repository import DashboardRepository
from hrms.repositories.menu_repository import MenuRepository
from hrms.services.sample_data_service import SampleDataService


async def seed_data(include_menu: bool = True, force: bool = False):
    """
    Seed reference data in the database.

    Args:
        include_menu: Also seed menu items and role permissions
        force: If True, overwrite existing rows with the defaults
    """
    async with async_session_factory() as session:
        try:
            service = SampleDataService(
                activity_repository=ActivityRepository(session),
                dashboard_repository=DashboardRepository(session),
                menu_repository=MenuRepository(session),
            )
            result = await service.seed(include_menu=include_menu, force=force)
            await session.commit()

            click.echo("\n✓ Reference data seeded")
            click.echo(f"  Activity types created: {result.activity_types_created}")
            click.echo(f"  Dashboard stats created: {result.stats_created}")
            click.echo(f"  Quick actions created: {result.quick_actions_created}")
            if include_menu:
                click.echo(f"  Menu items created: {result.menu_items_created}")
                click.echo(f"  Menu permissions written: {result.permissions_written}")

        except Exception as e:
            await session.rollback()
            click.echo(f"✗ Error seeding data: {e}", err=True)
            sys.exit(1)


@click.command()
@click.option("--force", is_flag=True, help="Overwrite existing rows with the defaults")
@click.option("--skip-menu", is_flag=True, help="Do not seed the navigation menu")
def main(force: bool, skip_menu: bool):
    """Seed reference data."""
    click.echo("Seeding reference data...")
    asyncio.run(seed_data(include_menu=not skip_menu, force=force))


if __name__ == "__main__":
    main()
