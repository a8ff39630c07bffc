"""Command line entry point for the inventory service.

Usage:
    # Run the API server
    inventory-api serve --port 8080

    # Create tables and load the demo products
    inventory-api init-db --seed

    # Print the stats dashboard and product list from a running API
    inventory-api dashboard --url http://localhost:8080
"""

import argparse
import asyncio
import sys

import httpx

from inventory.config import settings


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="inventory-api",
        description="Inventory API server and console views",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP API")
    serve.add_argument(
        "--host",
        default=settings.host,
        help=f"Bind address (default: {settings.host})",
    )
    serve.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help=f"Port (default: {settings.port})",
    )
    serve.add_argument(
        "--reload",
        action="store_true",
        help="Reload on code changes (development only)",
    )

    init_db = subparsers.add_parser("init-db", help="Create tables")
    init_db.add_argument(
        "--seed",
        action="store_true",
        help="Insert demo products when the table is empty",
    )

    dashboard = subparsers.add_parser("dashboard", help="Print stats and products")
    dashboard.add_argument(
        "--url",
        default=settings.api_base_url,
        help=f"Inventory API base URL (default: {settings.api_base_url})",
    )

    return parser.parse_args(argv)


async def run_init_db(seed: bool) -> int:
    from inventory.infra.database import close_db_engine, get_db_session, init_db
    from inventory.infra.seed import seed_demo_products

    try:
        await init_db()
        if seed:
            async with get_db_session() as session:
                inserted = await seed_demo_products(session)
            print(f"Seeded {inserted} products")
    finally:
        await close_db_engine()
    return 0


async def run_dashboard(base_url: str) -> int:
    from inventory.client import DashboardView, ProductListView, ProductServiceClient

    dashboard = DashboardView()
    product_list = ProductListView()

    async with ProductServiceClient(base_url=base_url) as client:
        try:
            await dashboard.load(client)
            await product_list.load(client)
        except httpx.HTTPError as e:
            print(f"Error: could not reach inventory API at {base_url}: {e}")
            return 1

    print(dashboard.render())
    print()
    print(product_list.render())
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    if args.command == "serve":
        import uvicorn

        uvicorn.run(
            "inventory.main:app",
            host=args.host,
            port=args.port,
            reload=args.reload,
            log_level=settings.log_level.lower(),
        )
        return 0

    if args.command == "init-db":
        from inventory.infra.logging import setup_logging

        setup_logging()
        return asyncio.run(run_init_db(args.seed))

    return asyncio.run(run_dashboard(args.url))


if __name__ == "__main__":
    sys.exit(main())
