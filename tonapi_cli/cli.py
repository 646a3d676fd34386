# TonAPI CLI — reflective dispatch over the TonAPI client
# Copyright (C) 2025–2026 The tonapi-cli contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""CLI entry point — Click commands over the reflective TonAPI wrapper."""

from __future__ import annotations

import asyncio
import inspect
import json
import logging
import sys
from typing import Any, Callable, NoReturn, TypeVar

import click
from rich.console import Console
from rich.logging import RichHandler

from .config import ApiConfig, split_modules
from .exceptions import TonApiCliError
from .wrapper import TonApiWrapper

T = TypeVar("T")


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logger = logging.getLogger("tonapi_cli")
    logger.handlers = [RichHandler(console=Console(stderr=True), show_path=False, show_time=False)]
    logger.setLevel(level)


def _fail(e: TonApiCliError) -> NoReturn:
    click.secho(f"Error: {e}", fg="red", err=True)
    if e.hint:
        click.secho(f"Hint: {e.hint}", fg="yellow", err=True)
    sys.exit(e.exit_code)


def _guarded(fn: Callable[[], T]) -> T:
    """Run ``fn``, turning tonapi-cli errors into a red message and exit code."""
    try:
        return fn()
    except TonApiCliError as e:
        _fail(e)


def _make_wrapper(ctx: click.Context, *, needs_key: bool) -> TonApiWrapper:
    opts = ctx.obj
    return _guarded(
        lambda: TonApiWrapper(
            opts["config"],
            testnet=opts["testnet"],
            api_key=opts["api_key"],
            skip_api_key_check=opts["skip_api_key_check"] or not needs_key,
            module_filter=opts["module_filter"],
            client=opts.get("client"),
        )
    )


def _arguments_fit(api: TonApiWrapper, module: str, method: str, call_args: list[Any]) -> bool:
    """False only when the method's signature is known and rejects ``call_args``."""
    target = getattr(getattr(api.client, module), method)
    try:
        sig = inspect.signature(target)
    except (ValueError, TypeError):
        return True
    try:
        sig.bind(*call_args)
    except TypeError:
        return False
    return True


def _echo_json(data: Any) -> None:
    if hasattr(data, "model_dump"):
        data = data.model_dump()
    click.echo(json.dumps(data, indent=2, default=str))


@click.group()
@click.option("--testnet/--mainnet", default=None, help="Network to use (default: $TON_API_TESTNET or mainnet)")
@click.option("--api-key", default=None, help="TonAPI key (default: $TON_API_KEY)")
@click.option("--modules", default=None, help="Comma-separated allow-list of modules, e.g. accounts,nft")
@click.option("--skip-api-key-check", is_flag=True, help="Call TonAPI without a key (low rate limit)")
@click.option("-v", "--verbose", count=True, help="-v for info, -vv for debug logging")
@click.pass_context
def cli(
    ctx: click.Context,
    testnet: bool | None,
    api_key: str | None,
    modules: str | None,
    skip_api_key_check: bool,
    verbose: int,
) -> None:
    """TonAPI CLI — call any TonAPI method by module and method name."""
    _configure_logging(verbose)
    ctx.ensure_object(dict)
    if ctx.obj.get("config") is None:
        ctx.obj["config"] = _guarded(ApiConfig.from_env)
    ctx.obj["testnet"] = testnet
    ctx.obj["api_key"] = api_key
    ctx.obj["module_filter"] = split_modules(modules) if modules is not None else None
    ctx.obj["skip_api_key_check"] = skip_api_key_check


# ── Discovery ───────────────────────────────────────────────────────

@cli.command("list")
@click.argument("module", required=False)
@click.option("--long", "-l", "long_format", is_flag=True, help="Show parameter hints for each method")
@click.pass_context
def list_cmd(ctx: click.Context, module: str | None, long_format: bool) -> None:
    """List available modules and their methods."""
    api = _make_wrapper(ctx, needs_key=False)

    if module is not None and not api.has_module(module):
        click.secho(f"Error: module {module} not found", fg="red", err=True)
        sys.exit(1)

    listing = api.get_sorted_modules_and_methods()
    modules = [module] if module is not None else listing.modules
    if not modules:
        click.echo("No modules available.")
        return
    for name in modules:
        click.secho(name, bold=True)
        for method in listing.methods_by_module[name]:
            if long_format:
                click.echo(f"  {method:45s}  {api.get_method_signature(name, method)}")
            else:
                click.echo(f"  {method}")


@cli.command("describe")
@click.argument("module")
@click.argument("method")
@click.pass_context
def describe_cmd(ctx: click.Context, module: str, method: str) -> None:
    """Show description and parameters of a method."""
    api = _make_wrapper(ctx, needs_key=False)

    if not api.has_module(module):
        click.secho(f"Error: module {module} not found", fg="red", err=True)
        sys.exit(1)
    if not api.has_method(module, method):
        click.secho(f"Error: method {method} not found in module {module}", fg="red", err=True)
        sys.exit(1)

    click.echo(api.get_method_description(module, method))
    click.echo(f"Parameters: {api.get_method_signature(module, method)}")


# ── Invocation ──────────────────────────────────────────────────────

@cli.command("call", context_settings={"ignore_unknown_options": True})
@click.argument("module")
@click.argument("method")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.option("--params", "-p", default=None, help="JSON object passed as the first argument")
@click.pass_context
def call_cmd(ctx: click.Context, module: str, method: str, args: tuple[str, ...], params: str | None) -> None:
    """Call METHOD of MODULE. ARGS are JSON-decoded when possible."""
    api = _make_wrapper(ctx, needs_key=True)

    if not api.has_method(module, method):
        click.secho(f"Error: method {method} not found in module {module}", fg="red", err=True)
        click.echo("Run `tonapi list` to see the available methods.", err=True)
        sys.exit(1)

    call_args = _guarded(lambda: api.parse_arguments(params, args))

    if not _arguments_fit(api, module, method, call_args):
        click.secho(f"Error: arguments do not match {module}.{method}", fg="red", err=True)
        click.echo(f"Parameters: {api.get_method_signature(module, method)}", err=True)
        sys.exit(1)

    async def _run() -> Any:
        async with api:
            return await api.call_method(module, method, *call_args)

    result = _guarded(lambda: asyncio.run(_run()))
    _echo_json(result)


def main() -> None:
    """Entry point for the ``tonapi`` script and ``python -m tonapi_cli``."""
    cli(standalone_mode=True)
