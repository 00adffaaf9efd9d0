import pytest
import tempfile
import shutil
from pathlib import Path
from typing import List, Optional, Sequence

from wpr.ui.base import Responder


class ScriptedResponder(Responder):
    """Answers questions from prepared lists instead of a terminal.

    ``answers`` feeds :meth:`ask` and ``choices`` feeds :meth:`choose`. A
    choice may be a label, or a callable that receives the offered options
    and returns one of them.
    """

    def __init__(self, answers: Sequence[str] = (), choices: Sequence = (),
                 confirm_answer: bool = False):
        self.answers = list(answers)
        self.choices = list(choices)
        self.confirm_answer = confirm_answer
        self.asked: List[str] = []
        self.offered: List[List[str]] = []

    def ask(self, message: str) -> str:
        self.asked.append(message)
        if not self.answers:
            raise AssertionError(f"Unexpected question: {message}")
        return self.answers.pop(0)

    def choose(self, message: str, options: Sequence[str]) -> Optional[str]:
        self.offered.append(list(options))
        if not self.choices:
            raise AssertionError(f"Unexpected choice: {message}")
        choice = self.choices.pop(0)
        if callable(choice):
            return choice(options)
        return choice

    def confirm(self, message: str, default: bool = True) -> bool:
        self.asked.append(message)
        return self.confirm_answer


@pytest.fixture
def scripted():
    """Factory for scripted responders."""
    return ScriptedResponder


@pytest.fixture
def temp_workspace():
    """Create a temporary directory for test files."""
    temp_dir = tempfile.mkdtemp()
    yield Path(temp_dir)
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def sample_repo(temp_workspace):
    """Create a sample project structure for testing."""
    repo_root = temp_workspace / "sample_repo"
    repo_root.mkdir()

    # Create directory structure
    (repo_root / "src").mkdir()
    (repo_root / "src" / "utils").mkdir()
    (repo_root / "lib").mkdir()
    (repo_root / "docs").mkdir()
    (repo_root / ".git").mkdir()
    (repo_root / "node_modules").mkdir()
    (repo_root / "node_modules" / "left-pad").mkdir()

    # Create files
    (repo_root / "README.md").write_text("# Sample Project\n\nTest project for wpr")
    (repo_root / "package.json").write_text('{"name": "sample"}')
    (repo_root / "src" / "app.js").write_text("console.log('app');\n")
    (repo_root / "src" / "utils" / "helpers.js").write_text("export const helper = () => 42;\n")
    (repo_root / "lib" / "app.js").write_text("module.exports = {};\n")
    (repo_root / "docs" / "guide.md").write_text("## Guide\n")
    (repo_root / ".git" / "config").write_text("[core]\n    repositoryformatversion = 0")
    (repo_root / "node_modules" / "left-pad" / "index.js").write_text("module.exports = pad;")

    return repo_root


@pytest.fixture
def pick():
    """Factory for choices that check the label was offered before picking it."""
    def make(label: str):
        def _pick(options):
            assert label in options, f"{label!r} not offered in {options!r}"
            return label
        return _pick
    return make
