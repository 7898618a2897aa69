from django.apps import AppConfig


class DocCommentsConfig(AppConfig):
    name = 'doccomments'
    verbose_name = 'Doc comments'

    def ready(self):
        """Fail early on a broken DOC_COMMENTS setting."""
        from .conf import get_doc_settings

        get_doc_settings()
