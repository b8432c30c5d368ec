"""Common CLI utilities, decorators, and helpers."""

from __future__ import annotations

import sys
from dataclasses import replace
from functools import wraps
from typing import Any, Callable, Optional, TypeVar

import click

from hdfsctl.core.config import Config, Profile
from hdfsctl.core.exceptions import ConfigurationError, HdfsCtlError, ProfileNotFoundError
from hdfsctl.core.logging import setup_logging
from hdfsctl.core.output import print_error
from hdfsctl.services.uploads import FileUploader

F = TypeVar("F", bound=Callable[..., Any])


# =============================================================================
# Context Object
# =============================================================================


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[Config] = None
        self.profile_name: Optional[str] = None
        self.url: Optional[str] = None
        self.user: Optional[str] = None
        self.quiet: bool = False
        self.verbose: bool = False

    def get_profile(self) -> Profile:
        """Resolve the profile, applying --url/--user overrides.

        Raises:
            ConfigurationError: If no profile is configured and no --url given.
        """
        if self.url:
            return Profile(url=self.url, user=self.user or "")

        if self.config is None:
            self.config = Config.load()

        try:
            profile = self.config.get_profile(self.profile_name)
        except ProfileNotFoundError:
            raise ConfigurationError(
                f"Profile '{self.profile_name or self.config.default_profile}' not found. "
                "Run 'hdfsctl config init' to create one."
            )

        if self.user:
            profile = replace(profile, user=self.user)
        return profile

    def get_uploader(self) -> FileUploader:
        """Build an uploader for the resolved profile."""
        profile = self.get_profile()
        return FileUploader(
            profile.connection(),
            timeout=profile.timeout,
            verify_ssl=profile.verify_ssl,
        )


pass_context = click.make_pass_decorator(Context, ensure=True)


# =============================================================================
# Global Options
# =============================================================================


def global_options(f: F) -> F:
    """Add global options to a command."""

    @click.option(
        "--profile",
        "-p",
        envvar="HDFS_PROFILE",
        help="Config profile to use",
    )
    @click.option(
        "--quiet",
        "-q",
        is_flag=True,
        help="Only print errors",
    )
    @click.option(
        "--verbose",
        "-v",
        is_flag=True,
        help="Enable verbose output",
    )
    @pass_context
    @wraps(f)
    def wrapper(
        ctx: Context,
        profile: Optional[str],
        quiet: bool,
        verbose: bool,
        *args: Any,
        **kwargs: Any,
    ) -> Any:
        """Populate context from global options and invoke the command."""
        ctx.profile_name = profile
        ctx.quiet = quiet
        ctx.verbose = verbose

        setup_logging(quiet=quiet, verbose=verbose)

        return f(ctx, *args, **kwargs)

    return wrapper  # type: ignore


# =============================================================================
# Error Handling
# =============================================================================


def handle_errors(f: F) -> F:
    """Handle common errors and convert to CLI exit codes."""

    @wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        """Capture errors and exit with consistent messaging."""
        try:
            return f(*args, **kwargs)
        except HdfsCtlError as e:
            print_error(str(e))
            sys.exit(ExitCode.GENERAL_ERROR)
        except OSError as e:
            print_error(str(e))
            sys.exit(ExitCode.GENERAL_ERROR)
        except click.ClickException:
            raise

    return wrapper  # type: ignore


# =============================================================================
# Exit Codes
# =============================================================================


class ExitCode:
    """Standard exit codes."""

    SUCCESS = 0
    GENERAL_ERROR = 1
