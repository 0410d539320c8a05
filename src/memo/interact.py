"""Capabilities that need the user at a terminal: picking a memo and editing one.

:class:`Selector` and :class:`Editor` define the interfaces; :class:`FzfSelector` and :class:`CommandEditor`
implement them with external programs.
"""

import shlex
import shutil
import subprocess
from typing import List, Optional


# fzf exit statuses meaning the user picked nothing
_NO_SELECTION_CODES = {1, 130}


class SelectorError(Exception):
    """Raised when the selector could not be run, as opposed to the user choosing nothing."""
    def __init__(self, message: str, cause: BaseException = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class Selector:
    def select(self, names: List[str]) -> Optional[str]:
        """Lets the user choose one of the names. Returns None if nothing was chosen."""
        raise NotImplementedError()


class Editor:
    def edit(self, path: str) -> None:
        """Lets the user edit the file, returning once they are done."""
        raise NotImplementedError()


class FzfSelector(Selector):
    """Picks a name by piping the candidates into a fuzzy-finder such as ``fzf``.

    The finder draws its interface on the inherited terminal; only its stdout is captured.
    """
    def __init__(self, command: List[str]):
        self.command = command

    def select(self, names: List[str]) -> Optional[str]:
        try:
            result = subprocess.run(self.command, input='\n'.join(names) + '\n', stdout=subprocess.PIPE,
                                    universal_newlines=True)
        except OSError as e:
            raise SelectorError(f'Could not run {self.command[0]}: {e}', e)
        if result.returncode in _NO_SELECTION_CODES:
            return None
        if result.returncode:
            raise SelectorError(f'{self.command[0]} exited with status {result.returncode}')
        name = result.stdout.strip()
        return name or None


class CommandEditor(Editor):
    """Runs an editor command with the file path appended as its last argument.

    The command is split like a shell would split it, so preferences such as ``code --wait`` work.
    A command that names an executable as a whole (even one whose path contains spaces), or that
    cannot be split, is run as a single program.
    The editor's exit status is ignored, but failure to start it raises :exc:`OSError`.
    """
    def __init__(self, command: str):
        self.command = command

    def argv(self) -> List[str]:
        if shutil.which(self.command):
            return [self.command]
        try:
            return shlex.split(self.command)
        except ValueError:
            # unbalanced quotes
            return [self.command]

    def edit(self, path: str) -> None:
        subprocess.run(self.argv() + [path])
