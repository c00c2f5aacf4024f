from cookbook.config import Settings

bind = f"0.0.0.0:{Settings.from_env().port}"
wsgi_app = "main:app"
