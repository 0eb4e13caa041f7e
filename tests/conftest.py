"""Shared test fixtures for quality scanner tests."""

from pathlib import Path

import pytest


@pytest.fixture
def write_file(tmp_path):
    """Write ``content`` to ``tmp_path / relpath``, creating parent directories."""

    def _write(relpath: str, content: str = "") -> Path:
        path = tmp_path / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def component_source():
    """Build component source with exact metric values.

    The result has exactly ``lines`` newline-delimited segments (or more, if
    the requested statements need more room) and no trailing newline.
    """

    def _build(lines=10, imports=0, states=0, effects=0, hooks=()):
        body = [f"import Thing{i} from './thing{i}';" for i in range(imports)]
        body += [f"const [v{i}, setV{i}] = useState(0);" for i in range(states)]
        body += ["useEffect(() => {}, []);" for _ in range(effects)]
        body += [f"const h{i} = {name}();" for i, name in enumerate(hooks)]
        body += ["// filler"] * max(0, lines - len(body))
        return "\n".join(body)

    return _build
