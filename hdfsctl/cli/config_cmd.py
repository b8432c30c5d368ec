"""Config commands for hdfsctl."""

from __future__ import annotations

import click

from hdfsctl.core.config import CONFIG_FILE, DEFAULT_TIMEOUT, Config
from hdfsctl.core.exceptions import HdfsCtlError
from hdfsctl.core.output import OutputFormat, print_error, print_key_value, print_output, print_success
from hdfsctl.core.validation import validate_endpoint_url, validate_username


@click.group()
def config() -> None:
    """Manage hdfsctl configuration."""
    pass


@config.command("init")
@click.option("--url", prompt="WebHDFS endpoint URL", help="WebHDFS endpoint URL")
@click.option("--user", prompt="User to act as", help="User to act as")
@click.option("--profile", default="default", help="Profile name")
@click.option("--timeout", type=int, default=DEFAULT_TIMEOUT, help="Request timeout in seconds")
@click.option("--no-verify-ssl", is_flag=True, help="Disable SSL verification")
@click.option("--force", is_flag=True, help="Overwrite existing profile")
def config_init(
    url: str,
    user: str,
    profile: str,
    timeout: int,
    no_verify_ssl: bool,
    force: bool,
) -> None:
    """Create configuration file with a new profile.

    Example:
        hdfsctl config init --url webhdfs://namenode:9870 --user etl
    """
    try:
        url = validate_endpoint_url(url)
        user = validate_username(user)
    except HdfsCtlError as e:
        print_error(str(e))
        raise SystemExit(1)

    if CONFIG_FILE.exists():
        cfg = Config.load(CONFIG_FILE)
        if cfg.has_profile(profile) and not force:
            print_error(f"Profile '{profile}' already exists. Use --force to overwrite.")
            raise SystemExit(1)
    else:
        cfg = Config()

    cfg.add_profile(
        name=profile,
        url=url,
        user=user,
        timeout=timeout,
        verify_ssl=not no_verify_ssl,
    )

    # Set as default if it's the first profile
    if len(cfg.profiles) == 1:
        cfg.default_profile = profile

    cfg.save(CONFIG_FILE)

    print_success(f"Configuration saved to {CONFIG_FILE}")
    print_key_value({"profile": profile, "url": url, "user": user})


@config.command("show")
@click.option("--output", "-o", type=click.Choice(["json", "table"]), default="table")
def config_show(output: str) -> None:
    """Show current configuration."""
    try:
        cfg = Config.load(CONFIG_FILE)
    except HdfsCtlError as e:
        print_error(str(e))
        raise SystemExit(1)

    if not cfg.profiles:
        print_error("No configuration found. Run 'hdfsctl config init' first.")
        raise SystemExit(1)

    data = {
        "config_file": str(CONFIG_FILE),
        "default_profile": cfg.default_profile,
        "profiles": list(cfg.profiles.keys()),
    }

    if output == "json":
        data["profile_details"] = {name: p.to_dict() for name, p in cfg.profiles.items()}
        print_output(data, format=OutputFormat.JSON)
        return

    print_key_value(data, title="Configuration")
    click.echo()
    for name, profile in cfg.profiles.items():
        marker = " (default)" if name == cfg.default_profile else ""
        click.echo(f"Profile: {name}{marker}")
        print_key_value(
            {
                "url": profile.url,
                "user": profile.user or "-",
                "verify_ssl": profile.verify_ssl,
                "timeout": f"{profile.timeout}s",
            }
        )
        click.echo()
