import os

from flask import Flask, render_template

from config import (
    OUTPUT_STYLES, DEFAULT_OUTPUT_STYLE, STYLES_SOURCE_DIR, STYLES_OUTPUT_DIR,
    STYLES_ENVIRONMENT
)
from environment_config import CURRENT_ENVIRONMENT
from scss_sync import synchronize_in_environment


def sync_stylesheets(source_dir=STYLES_SOURCE_DIR, dest_dir=STYLES_OUTPUT_DIR,
                     current_env=CURRENT_ENVIRONMENT):
    """
    Recompiles the app's stylesheets when running in the styles environment.
    Failures are reported and the app keeps starting with whatever CSS exists.
    """
    if not os.path.isdir(source_dir):
        print(f"Warning: SCSS directory not found at {source_dir}")
        return []
    try:
        return synchronize_in_environment(
            STYLES_ENVIRONMENT, current_env, source_dir, dest_dir, DEFAULT_OUTPUT_STYLE
        )
    except Exception as e:
        print(f"SCSS compilation failed: {e}")
        return []


# Run SCSS compilation
sync_stylesheets()

app = Flask(__name__)


@app.route('/')
def index():
    return render_template('index.html', stylesheet='main' + OUTPUT_STYLES[DEFAULT_OUTPUT_STYLE])
