import os
from dotenv import load_dotenv

load_dotenv()


def configure_settings_module(default: str = "tasklist_project.settings.development") -> str:
    """
    Pick the Django settings module from the ENV variable unless one is already set.
    """
    env = os.getenv("ENV", "DEVELOPMENT").upper()
    modules = {
        "DEVELOPMENT": "tasklist_project.settings.development",
        "PRODUCTION": "tasklist_project.settings.production",
        "TEST": "tasklist_project.settings.test",
    }
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", modules.get(env, default))
    return os.environ["DJANGO_SETTINGS_MODULE"]
