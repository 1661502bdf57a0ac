"""Helpers for locating a mod's data directory under the streaming assets
folder (currently STREAMING_ASSETS_PATH/Modded/<mod GUID>)."""

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from .path import combine

DEFAULT_MODDED_DIR_NAME = 'Modded'


def _get_guid(plugin) -> str:
    # accept either the plugin's metadata object or the GUID itself
    guid = plugin if isinstance(plugin, str) else getattr(plugin, 'guid', None)
    if not guid:
        raise ValueError(f'Plugin {plugin!r} has no GUID')
    return guid


def get_streaming_assets_path() -> str:
    path = getattr(settings, 'STREAMING_ASSETS_PATH', None)
    if not path:
        raise ImproperlyConfigured(
            'STREAMING_ASSETS_PATH must be set to locate mod data.'
        )
    return str(path)


def get_mod_path(plugin) -> str:
    """Get a mod's data directory. The directory isn't required to exist."""
    modded_dir_name = getattr(
        settings, 'MODDED_DIR_NAME', DEFAULT_MODDED_DIR_NAME
    )
    return combine(
        [get_streaming_assets_path(), modded_dir_name, _get_guid(plugin)]
    )


def get_mod_file(plugin, *segments: str) -> str:
    """Resolve `segments` inside a mod's data directory."""
    return combine([get_mod_path(plugin), *segments])
