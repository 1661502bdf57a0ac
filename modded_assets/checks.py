import os
from django.conf import settings
from django.core.checks import Warning, register


@register()
def check_streaming_assets_path(app_configs, **kwargs):
    path = getattr(settings, 'STREAMING_ASSETS_PATH', None)
    if not path:
        return [
            Warning(
                'STREAMING_ASSETS_PATH is not set.',
                hint='Mod data paths cannot be resolved without it.',
                id='modded_assets.W001',
            )
        ]
    if not os.path.isdir(path):
        return [
            Warning(
                f'STREAMING_ASSETS_PATH ({path}) is not an existing directory.',
                id='modded_assets.W002',
            )
        ]
    return []
