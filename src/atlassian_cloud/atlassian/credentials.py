"""Cross-platform credential management for Atlassian Cloud APIs.

Each value is resolved independently, in the following order:
1. Explicit parameters passed to the client
2. Environment variables (ATLASSIAN_SITE_URL, ATLASSIAN_USER_EMAIL,
   ATLASSIAN_API_TOKEN, ATLASSIAN_BEARER_TOKEN)
3. System keyring (via keyring library)
4. .env file in current directory or parent directories

Jira Agile endpoints are usually called with Basic auth (e-mail + API token),
the Admin and SCIM APIs with an organization API key sent as a bearer token.

Example:
    from atlassian_cloud.atlassian.credentials import get_credentials

    creds = get_credentials(site_url="https://api.atlassian.com/")
"""

import logging
import os
from pathlib import Path
from typing import NamedTuple

import keyring

logger = logging.getLogger(__name__)

# Default keyring service name
DEFAULT_SERVICE = "atlassian-cloud-sdk"

# Environment variable names
ENV_SITE_URL = "ATLASSIAN_SITE_URL"
ENV_USER_EMAIL = "ATLASSIAN_USER_EMAIL"
ENV_API_TOKEN = "ATLASSIAN_API_TOKEN"  # noqa: S105
ENV_BEARER_TOKEN = "ATLASSIAN_BEARER_TOKEN"  # noqa: S105

# Keyring account names
KEYRING_SITE_URL = "site_url"
KEYRING_EMAIL = "user_email"
KEYRING_TOKEN = "api_token"  # noqa: S105
KEYRING_BEARER = "bearer_token"  # noqa: S105


class AtlassianCredentials(NamedTuple):
    """Resolved Atlassian credentials; any auth field may be None."""

    site_url: str
    email: str | None
    api_token: str | None
    bearer_token: str | None

    @property
    def has_basic_auth(self) -> bool:
        """Whether both halves of Basic auth are available."""
        return bool(self.email and self.api_token)


def get_credentials(
    site_url: str | None = None,
    email: str | None = None,
    api_token: str | None = None,
    bearer_token: str | None = None,
    service: str = DEFAULT_SERVICE,
) -> AtlassianCredentials:
    """Get Atlassian credentials from various sources.

    Args:
        site_url: Explicit site URL (overrides other sources)
        email: Explicit e-mail for Basic auth
        api_token: Explicit API token for Basic auth
        bearer_token: Explicit bearer token (organization API key)
        service: Keyring service name

    Returns:
        AtlassianCredentials with the site URL normalized to end in '/'

    Raises:
        ValueError: If no site URL can be found
    """
    resolved = {
        KEYRING_SITE_URL: site_url,
        KEYRING_EMAIL: email,
        KEYRING_TOKEN: api_token,
        KEYRING_BEARER: bearer_token,
    }
    env_names = {
        KEYRING_SITE_URL: ENV_SITE_URL,
        KEYRING_EMAIL: ENV_USER_EMAIL,
        KEYRING_TOKEN: ENV_API_TOKEN,
        KEYRING_BEARER: ENV_BEARER_TOKEN,
    }

    # Fall back to environment variables
    for account, env_name in env_names.items():
        if not resolved[account]:
            resolved[account] = os.environ.get(env_name)

    # Fall back to keyring
    for account in resolved:
        if not resolved[account]:
            resolved[account] = _get_from_keyring(service, account)

    # Fall back to .env file
    if not all(resolved.values()):
        env_vars = _load_dotenv()
        for account, env_name in env_names.items():
            if not resolved[account]:
                resolved[account] = env_vars.get(env_name)

    site = resolved[KEYRING_SITE_URL]
    if not site:
        raise ValueError(
            f"Missing Atlassian site URL. Set {ENV_SITE_URL}, "
            f"use the keyring, or provide site_url explicitly."
        )

    if not site.endswith("/"):
        site += "/"

    return AtlassianCredentials(
        site_url=site,
        email=resolved[KEYRING_EMAIL],
        api_token=resolved[KEYRING_TOKEN],
        bearer_token=resolved[KEYRING_BEARER],
    )


def save_credentials(
    site_url: str | None = None,
    email: str | None = None,
    api_token: str | None = None,
    bearer_token: str | None = None,
    service: str = DEFAULT_SERVICE,
) -> None:
    """Save the given credentials to the system keyring.

    Args:
        site_url: Atlassian site URL
        email: User e-mail
        api_token: API token
        bearer_token: Organization API key
        service: Keyring service name
    """
    values = {
        KEYRING_SITE_URL: site_url,
        KEYRING_EMAIL: email,
        KEYRING_TOKEN: api_token,
        KEYRING_BEARER: bearer_token,
    }
    for account, value in values.items():
        if value:
            keyring.set_password(service, account, value)
    logger.info("Credentials saved to keyring (service: %s)", service)


def delete_credentials(service: str = DEFAULT_SERVICE) -> None:
    """Delete credentials from the system keyring.

    Args:
        service: Keyring service name
    """
    for account in [KEYRING_SITE_URL, KEYRING_EMAIL, KEYRING_TOKEN, KEYRING_BEARER]:
        try:
            keyring.delete_password(service, account)
        except keyring.errors.PasswordDeleteError:
            pass  # Already deleted or doesn't exist
    logger.info("Credentials deleted from keyring (service: %s)", service)


def _get_from_keyring(service: str, account: str) -> str | None:
    """Get a value from the system keyring.

    Args:
        service: Keyring service name
        account: Account/key name

    Returns:
        Value from keyring or None if not found
    """
    try:
        return keyring.get_password(service, account)
    except keyring.errors.KeyringError as e:
        logger.debug("Keyring error for %s/%s: %s", service, account, e)
        return None


def _load_dotenv() -> dict[str, str]:
    """Load variables from the nearest .env file.

    Returns:
        Dictionary of environment variables from .env file
    """
    env_vars: dict[str, str] = {}

    current = Path.cwd()
    for directory in [current, *current.parents]:
        env_file = directory / ".env"
        if env_file.exists():
            logger.debug("Loading .env from %s", env_file)
            try:
                with open(env_file, encoding="utf-8") as f:
                    for line in f:
                        line = line.strip()
                        if not line or line.startswith("#"):
                            continue
                        if "=" in line:
                            key, _, value = line.partition("=")
                            key = key.strip()
                            value = value.strip()
                            if value and value[0] in ('"', "'") and value[-1] == value[0]:
                                value = value[1:-1]
                            env_vars[key] = value
            except OSError as e:
                logger.debug("Error reading .env file: %s", e)
            break  # Only load from first .env found

    return env_vars
