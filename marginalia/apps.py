from django.apps import AppConfig


class MarginaliaConfig(AppConfig):
    name = "marginalia"
    verbose_name = "Marginalia"
