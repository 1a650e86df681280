"""Test the bagel-shop command line interface."""

import json
from pathlib import Path

from click.testing import CliRunner

from bagel_shop.src.cli import cli
from bagel_shop.src.errors import InvalidArgumentError


def test_menu():
    runner = CliRunner()
    with runner.isolated_filesystem():
        result = runner.invoke(cli, ['menu'])

    assert result.exit_code == 0
    assert "BGLO" in result.output
    assert "Cream Cheese" in result.output
    assert "12 bagels for 3.99" in result.output
    assert "Coffee & Bagel for 1.25" in result.output


def test_price():
    runner = CliRunner()
    with runner.isolated_filesystem():
        result = runner.invoke(cli, ['price', 'BGLO+FILB'])

    assert result.exit_code == 0
    assert "Onion Bagel with Bacon: 0.61" in result.output


def test_price_unknown_item():
    runner = CliRunner()
    with runner.isolated_filesystem():
        result = runner.invoke(cli, ['price', 'Croissant'])

    assert result.exit_code == 1
    assert "Unknown item code" in result.output


def test_order_prints_receipt():
    """The mixed order comes to 9.97 on the printed receipt."""
    print("=" * 70)
    print("TEST: CLI Order")
    print("=" * 70)

    runner = CliRunner()
    with runner.isolated_filesystem():
        result = runner.invoke(cli, ['order', '2xBGLO', '12xBGLP', '6xBGLE', '3xCOFB'])

    print(result.output)
    assert result.exit_code == 0
    assert "Bob's Bagels" in result.output
    assert "9.97" in result.output
    assert "You saved a total of 1.60" in result.output
    print("\n[PASS] Receipt printed")


def test_order_json():
    runner = CliRunner()
    with runner.isolated_filesystem():
        result = runner.invoke(cli, ['order', '16xOnion', '--json'])

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["total_price_after_discount"] == "5.95"
    assert data["lines"] == [{"label": "Onion Bagel", "quantity": 16, "amount": "7.84"}]


def test_order_overflowing_basket():
    runner = CliRunner()
    with runner.isolated_filesystem():
        result = runner.invoke(cli, ['order', '3xBGLO', '--capacity', '2'])

    assert result.exit_code == 1
    assert "Basket is full" in result.output


def test_order_uses_configured_shop_name():
    runner = CliRunner()
    with runner.isolated_filesystem():
        assert runner.invoke(cli, ['init']).exit_code == 0
        config_file = Path('.bagel-shop') / 'config.yaml'
        assert config_file.exists()

        config_file.write_text(
            "receipt:\n  shop_name: Corner Bagels\n  width: 40\n  show_timestamp: false\n",
            encoding='utf-8',
        )
        result = runner.invoke(cli, ['order', 'COFB'])

    assert result.exit_code == 0
    assert "Corner Bagels" in result.output


def test_init_twice():
    runner = CliRunner()
    with runner.isolated_filesystem():
        runner.invoke(cli, ['init'])
        result = runner.invoke(cli, ['init'])

    assert "already exists" in result.output


def test_cleanup_confirmed():
    runner = CliRunner()
    with runner.isolated_filesystem():
        runner.invoke(cli, ['init'])
        result = runner.invoke(cli, ['cleanup'], input='y\n')

        assert result.exit_code == 0
        assert not Path('.bagel-shop').exists()


def test_bad_capacity_environment_variable():
    """A non-numeric capacity in the environment is reported, not a traceback."""
    runner = CliRunner()
    with runner.isolated_filesystem():
        result = runner.invoke(cli, ['menu'], env={'BAGEL_SHOP_BASKET_CAPACITY': 'lots'})

    assert result.exit_code == 1
    assert "❌ Error" in result.output
    assert "lots" in result.output
    assert not isinstance(result.exception, InvalidArgumentError)


def test_invalid_config_file_is_rejected():
    """Ill-typed values in config.yaml stop the command with a clear message."""
    print("=" * 70)
    print("CLI: invalid configuration file")
    print("=" * 70)

    runner = CliRunner()
    with runner.isolated_filesystem():
        assert runner.invoke(cli, ['init']).exit_code == 0
        config_file = Path('.bagel-shop') / 'config.yaml'
        config_file.write_text("basket:\n  default_capacity: many\n", encoding='utf-8')

        result = runner.invoke(cli, ['order', 'BGLO'])

        assert result.exit_code == 1
        assert "Invalid configuration" in result.output
        assert "Invalid basket capacity: many" in result.output
        assert not isinstance(result.exception, TypeError)

        # The broken file can still be replaced
        result = runner.invoke(cli, ['init', '--overwrite'])
        assert result.exit_code == 0
        assert runner.invoke(cli, ['order', 'BGLO']).exit_code == 0

    print("[PASS] Invalid config exits 1 and init --overwrite repairs it")
