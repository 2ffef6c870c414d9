import os

# Stylesheet Compilation Configuration
# Format: 'output_style': 'output extension'

OUTPUT_STYLES = {
    'nested': '.css',
    'expanded': '.css',
    'compact': '.css',
    'compressed': '.min.css'
}

DEFAULT_OUTPUT_STYLE = 'expanded'

# Only files with this extension are picked up as compilable sources
SOURCE_EXTENSION = '.scss'

# Partials are only meant to be imported, never compiled on their own
PARTIAL_PREFIX = '_'

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
STYLES_SOURCE_DIR = os.path.join(BASE_DIR, 'static', 'scss')
STYLES_OUTPUT_DIR = os.path.join(BASE_DIR, 'static', 'css')

# The app recompiles its stylesheets on startup only in this environment
STYLES_ENVIRONMENT = 'development'
