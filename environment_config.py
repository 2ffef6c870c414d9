import os


def get_environment():
    """
    Determine the environment the app is running in.
    Order: APP_ENV > FLASK_ENV > 'development'
    """
    return os.environ.get('APP_ENV') or os.environ.get('FLASK_ENV') or 'development'

CURRENT_ENVIRONMENT = get_environment()
print(f"Detected environment: {CURRENT_ENVIRONMENT}")
