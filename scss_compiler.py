import sass


class StylesheetCompileError(Exception):
    """
    Raised when the SCSS compiler rejects a stylesheet.
    Keeps the offending file path next to the compiler's own message.
    """

    def __init__(self, path, message):
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message


def compile_scss(source, import_path, output_style):
    """
    Compiles raw SCSS source text to CSS with libsass.
    import_path is searched for @import targets (partials, mixins).
    """
    try:
        return sass.compile(
            string=source,
            include_paths=[import_path],
            output_style=output_style
        )
    except sass.CompileError as e:
        raise StylesheetCompileError('<string>', str(e)) from e
