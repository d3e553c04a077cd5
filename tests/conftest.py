import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import xml_compiler
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


# Common test fixtures
@pytest.fixture
def write_file(tmp_path: Path):
    """Return a helper that writes text under tmp_path and returns the path."""
    def _write(relative: str, content: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content.encode("utf-8"))
        return path
    return _write


@pytest.fixture
def site_root(tmp_path: Path, write_file):
    """Create a small input tree with one root document and one include."""
    write_file("site/sub/1_a.xml", '<doc><!--#include file="part.xml"--></doc>')
    write_file("site/sub/part.xml", "<placeholder><b>hi</b></placeholder>\n")
    return tmp_path / "site"
