import os
from collections import namedtuple

from config import (
    OUTPUT_STYLES, DEFAULT_OUTPUT_STYLE, SOURCE_EXTENSION, PARTIAL_PREFIX,
    STYLES_SOURCE_DIR, STYLES_OUTPUT_DIR
)
from scss_compiler import compile_scss, StylesheetCompileError

SourceFile = namedtuple('SourceFile', ['name', 'path'])


def with_trailing_sep(path):
    return os.path.join(path, '')


def collect_sources(source_dir):
    """
    Lists the compilable stylesheets directly inside source_dir.
    Partials (leading underscore) and subdirectories are left out.
    """
    sources = []
    with os.scandir(source_dir) as entries:
        for entry in entries:
            if not entry.name.endswith(SOURCE_EXTENSION):
                continue
            if entry.name.startswith((PARTIAL_PREFIX, '.')) or not entry.is_file():
                continue
            name = entry.name[:-len(SOURCE_EXTENSION)]
            sources.append(SourceFile(name, os.path.join(source_dir, entry.name)))
    return sorted(sources)


def _raise(err):
    raise err


def newest_mtime(source_dir):
    """
    Returns the newest modification time of any file under source_dir,
    searching recursively and regardless of extension. 0 when empty.
    Timestamps are whole seconds.
    """
    newest = 0
    for root, dirs, files in os.walk(source_dir, onerror=_raise):
        for name in files:
            path = os.path.join(root, name)
            if not os.path.isfile(path):
                continue
            mtime = int(os.stat(path).st_mtime)
            if mtime > newest:
                newest = mtime
    return newest


def output_path(dest_dir, name, output_style):
    return os.path.join(dest_dir, name + OUTPUT_STYLES[output_style])


def needs_recompile(artifacts, threshold):
    # Every artifact is held against the same tree-wide threshold, so touching
    # any partial recompiles the whole batch.
    for path in artifacts:
        if not os.path.isfile(path) or int(os.stat(path).st_mtime) < threshold:
            return True
    return False


class DirectorySynchronizer:
    """
    Keeps a directory of compiled CSS in step with a directory of SCSS sources.

    The compiler is any callable taking (source_text, import_path, output_style)
    and returning CSS text; it defaults to libsass via compile_scss.
    """

    def __init__(self, source_dir, dest_dir, output_style=DEFAULT_OUTPUT_STYLE,
                 compiler=compile_scss, verbose=True):
        if output_style not in OUTPUT_STYLES:
            raise ValueError(
                f"Unknown output style {output_style!r}, "
                f"expected one of: {', '.join(sorted(OUTPUT_STYLES))}"
            )
        self.source_dir = with_trailing_sep(source_dir)
        self.dest_dir = with_trailing_sep(dest_dir)
        self.output_style = output_style
        self.compiler = compiler
        self.verbose = verbose

    def _log(self, message):
        if self.verbose:
            print(message)

    def synchronize(self):
        """
        Recompiles every source when any compiled file is missing or older than
        the newest file in the source tree. Returns the paths written.
        """
        sources = collect_sources(self.source_dir)
        threshold = newest_mtime(self.source_dir)
        targets = [output_path(self.dest_dir, s.name, self.output_style) for s in sources]

        if not needs_recompile(targets, threshold):
            self._log("Stylesheets up to date.")
            return []

        written = []
        for source, target in zip(sources, targets):
            self._log(f"Compiling {source.path} to {target}...")
            with open(source.path, encoding='utf-8') as f:
                scss = f.read()
            try:
                css = self.compiler(scss, self.source_dir, self.output_style)
            except StylesheetCompileError as e:
                raise StylesheetCompileError(source.path, e.message) from e
            except Exception as e:
                raise StylesheetCompileError(source.path, str(e)) from e
            with open(target, 'w', encoding='utf-8') as f:
                f.write(css)
            written.append(target)

        self._log(f"Compiled {len(written)} stylesheet(s).")
        return written


def synchronize(source_dir, dest_dir, output_style=DEFAULT_OUTPUT_STYLE,
                compiler=compile_scss, verbose=True):
    synchronizer = DirectorySynchronizer(
        source_dir, dest_dir, output_style, compiler=compiler, verbose=verbose
    )
    return synchronizer.synchronize()


def synchronize_in_environment(target_env, current_env, source_dir, dest_dir,
                               output_style=DEFAULT_OUTPUT_STYLE,
                               compiler=compile_scss, verbose=True):
    """
    Runs synchronize only when the current environment is the target one.
    """
    if target_env != current_env:
        return []
    return synchronize(source_dir, dest_dir, output_style, compiler=compiler, verbose=verbose)


if __name__ == "__main__":
    synchronize(STYLES_SOURCE_DIR, STYLES_OUTPUT_DIR)
