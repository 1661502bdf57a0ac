from django.apps import AppConfig


class ModdedAssetsConfig(AppConfig):
    name = 'modded_assets'
    verbose_name = 'Modded assets'

    def ready(self):
        # implicitly registers the checks decorated with @register
        from . import checks
