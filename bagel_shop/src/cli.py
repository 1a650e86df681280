"""
Command-line interface for the bagel shop.

Provides commands for browsing the menu, checking prices and placing an order
that prints its receipt.
"""

import sys

import click

from .. import __version__
from .basket import Basket
from .catalog import Category, menu
from .config import Config, ConfigManager
from .constants import BAGEL_BUNDLE_OFFERS, COFFEE_BAGEL_COMBO, OFFER_LABELS
from .errors import BagelShopError
from .items import parse_item_spec
from .receipt import Receipt
from .store import Store
from ..utils.logger_setup import LoggerManager
from ..utils.money import format_amount


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Log to the console')
@click.pass_context
def cli(ctx, verbose):
    """Bagel Shop - Build a basket, place an order, print the receipt."""
    config_manager = ConfigManager()
    try:
        config = config_manager.load()
    except BagelShopError as e:
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)

    errors = config_manager.validate(config)
    if errors:
        click.echo("❌ Invalid configuration:", err=True)
        for error in errors:
            click.echo(f"  - {error}", err=True)
        # init and cleanup still run so a broken config can be replaced
        if ctx.invoked_subcommand not in ("init", "cleanup"):
            sys.exit(1)
        config = Config()

    LoggerManager.setup_logging(
        log_file=config.logging.log_file,
        level=config.logging.level,
        console=verbose,
    )

    ctx.obj = {'config_manager': config_manager, 'config': config}


@cli.command()
@click.option('--overwrite', is_flag=True, help='Overwrite existing configuration')
@click.pass_context
def init(ctx, overwrite):
    """Initialize configuration in current directory."""
    config_manager = ctx.obj['config_manager']

    if config_manager.init_config(overwrite=overwrite):
        click.echo("✓ Configuration initialized successfully")
        click.echo(f"  Config file: {config_manager.config_file}")
    else:
        click.echo("Configuration already exists. Use --overwrite to replace it.")


@cli.command('menu')
def show_menu():
    """List every product with its price, and the current offers."""
    current = None
    for entry in menu():
        if entry.category is not current:
            current = entry.category
            title = "Fillings" if current is Category.FILLING else f"{current.value}s"
            click.echo(f"\n{title}")
        click.echo(f"  {entry.code.value}  {entry.name:<16} {format_amount(entry.price):>6}")

    click.echo("\nOffers")
    for bundle in BAGEL_BUNDLE_OFFERS:
        click.echo("  " + OFFER_LABELS['bundle'].format(size=bundle.size,
                                                         price=format_amount(bundle.price))
                   + " (any single variety)")
    click.echo("  " + OFFER_LABELS['combo'].format(price=format_amount(COFFEE_BAGEL_COMBO.price))
               + f" ({COFFEE_BAGEL_COMBO.coffee.value})")


@cli.command()
@click.argument('item_spec')
def price(item_spec):
    """Show the unit price of ITEM_SPEC, e.g. BGLO+FILB."""
    try:
        quantity, item = parse_item_spec(item_spec)
        click.echo(f"{item.label}: {format_amount(item.price)}")
        if quantity > 1:
            click.echo(f"  x{quantity} = {format_amount(item.price * quantity)} (before offers)")

    except BagelShopError as e:
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.argument('item_specs', nargs=-1, required=True)
@click.option('--capacity', type=int, help='Basket capacity (default from config)')
@click.option('--json', 'as_json', is_flag=True, help='Print the receipt as JSON')
@click.pass_context
def order(ctx, item_specs, capacity, as_json):
    """Place an order for ITEM_SPECS and print the receipt.

    Each spec is [QTYx]CODE_OR_NAME[+FILLING], e.g. 12xBGLP or Onion+Bacon.
    """
    config = ctx.obj['config']

    try:
        basket = Basket(capacity if capacity is not None else config.basket.default_capacity)
        store = Store()
        store.add_basket(basket)

        for spec in item_specs:
            quantity, item = parse_item_spec(spec)
            for _ in range(quantity):
                if not basket.add_item(item):
                    click.echo(f"❌ Basket is full (capacity {basket.capacity}); "
                               f"could not add {item.label}", err=True)
                    sys.exit(1)

        order_id = store.place_order(basket)
        if order_id is None:
            click.echo("❌ Basket is empty, nothing to order", err=True)
            sys.exit(1)

        receipt = Receipt(
            store.get_order(order_id),
            shop_name=config.receipt.shop_name,
            width=config.receipt.width,
            show_timestamp=config.receipt.show_timestamp,
        )
        click.echo(receipt.to_json() if as_json else receipt.render())

    except BagelShopError as e:
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.pass_context
def cleanup(ctx):
    """Remove configuration directory (.bagel-shop)."""
    config_manager = ctx.obj['config_manager']

    if click.confirm("⚠️  This will delete the entire .bagel-shop directory. Continue?"):
        if config_manager.cleanup():
            click.echo("✓ Cleanup complete")
        else:
            click.echo("✗ Cleanup failed - configuration directory not found or could not be deleted")
            click.echo(f"  Directory: {config_manager.config_dir}")
            sys.exit(1)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
