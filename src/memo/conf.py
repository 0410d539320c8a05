from __future__ import annotations
from dataclasses import dataclass, field
import os
import os.path
from typing import List
from memo.models import validate_name


def default_finder_command() -> List[str]:
    return ['fzf', '--height', '40%', '--layout=reverse', '--prompt', '❯ Memo> ']


@dataclass
class MemoConf:
    root: str
    """The memo directory. Each memo is a ``.txt`` file directly inside it.

    The directory (and its ancestors) will be created the first time it is needed.
    """

    default_editor: str = 'vi'
    """Editor command used when no preference has been saved with ``note set editor``."""

    finder_command: List[str] = field(default_factory=default_finder_command)
    """Command line of the fuzzy-finder used to pick a memo when no name is given.

    The finder receives the memo names on stdin, one per line, and should print the chosen one to stdout.
    """

    @classmethod
    def for_user(cls) -> MemoConf:
        """Creates the configuration for the current user.

        The memo directory is ``$MEMO_DIR`` if that is set, and ``$HOME/.memo`` otherwise.

        Raises :exc:`memo.api.Error` if neither variable is set.
        """
        root = os.environ.get('MEMO_DIR')
        if not root:
            home = os.environ.get('HOME')
            if not home:
                from memo.api import Error
                raise Error('Cannot locate the memo directory: HOME is not set')
            root = os.path.join(home, '.memo')
        return cls(root=root)

    def memo_dir(self) -> str:
        os.makedirs(self.root, exist_ok=True)
        return self.root

    def memo_path(self, name: str) -> str:
        """Returns the path of the file for the given memo name.

        Raises :exc:`memo.models.InvalidNameError` if the name could address a file outside the memo directory.
        """
        validate_name(name)
        return os.path.join(self.memo_dir(), f'{name}.txt')

    def config_dir(self) -> str:
        path = os.path.join(self.memo_dir(), 'config')
        os.makedirs(path, exist_ok=True)
        return path

    def editor_path(self) -> str:
        return os.path.join(self.config_dir(), 'editor')

    def set_editor(self, command: str) -> None:
        """Saves the editor preference. The command is stored exactly as given."""
        with open(self.editor_path(), 'w') as file:
            file.write(command)

    def get_editor(self) -> str:
        """Returns the saved editor preference, or :attr:`default_editor` if none can be read."""
        try:
            with open(self.editor_path(), 'r') as file:
                editor = file.read().strip()
        except (OSError, UnicodeDecodeError):
            return self.default_editor
        return editor or self.default_editor

    def instantiate(self):
        from memo.api import Memos
        return Memos(self)
