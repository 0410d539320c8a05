"""Provides the main entry point for using the library, :class:`Memos`"""

from __future__ import annotations
import os
import os.path
from operator import attrgetter
from typing import Iterator, List, Optional
from memo.conf import MemoConf
from memo.interact import CommandEditor, Editor, FzfSelector, Selector
from memo.models import MemoExistsError, MemoInfo, MemoNotFoundError


class Error(Exception):
    pass


class Memos:
    """Main entry point for working programmatically with your memos.

    Generally, you should get an instance using the :meth:`Memos.for_user` method.

    Every method works directly against the files in the memo directory; nothing is cached between calls.

    .. attribute:: conf
       :type: memo.conf.MemoConf

    .. attribute:: selector
       :type: memo.interact.Selector

       Used by :meth:`select` when the user has not named a memo.

    Here's an example of how to use this class:

    .. code-block:: python

       from memo.api import Memos
       memos = Memos.for_user()
       for name in memos.names():
           memos.add(name, 'reviewed')
    """

    @staticmethod
    def for_user() -> Memos:
        """Creates an instance using :meth:`memo.conf.MemoConf.for_user`."""
        return MemoConf.for_user().instantiate()

    def __init__(self, conf: MemoConf, selector: Selector = None, editor: Editor = None):
        self.conf = conf
        self.selector = selector or FzfSelector(conf.finder_command)
        self._editor = editor

    @property
    def editor(self) -> Editor:
        """The editor given to the constructor, or else one for the currently saved preference."""
        if self._editor:
            return self._editor
        return CommandEditor(self.conf.get_editor())

    def _existing_path(self, name: str) -> str:
        path = self.conf.memo_path(name)
        if not os.path.isfile(path):
            raise MemoNotFoundError(name)
        return path

    def create(self, name: str, force: bool = False) -> str:
        """Creates an empty memo and returns its path.

        If the memo already exists, raises :exc:`memo.models.MemoExistsError` and leaves it alone,
        unless force is True, in which case the existing memo is truncated.
        """
        path = self.conf.memo_path(name)
        if os.path.exists(path) and not force:
            raise MemoExistsError(name)
        with open(path, 'w'):
            pass
        return path

    def delete(self, name: str) -> bool:
        """Deletes the memo. Returns False if there was no such memo."""
        path = self.conf.memo_path(name)
        if not os.path.isfile(path):
            return False
        os.remove(path)
        return True

    def update(self, old_name: str, new_name: str) -> str:
        """Renames a memo and returns its new path.

        An existing memo with the new name is replaced.
        """
        dest = self.conf.memo_path(new_name)
        src = self._existing_path(old_name)
        os.replace(src, dest)
        return dest

    def read(self, name: str) -> str:
        with open(self._existing_path(name), 'r') as file:
            return file.read()

    def add(self, name: str, content: str) -> None:
        """Appends content to the memo as a new line."""
        with open(self._existing_path(name), 'a') as file:
            file.write(f'{content}\n')

    def edit(self, name: str) -> None:
        """Opens the memo in the editor and waits for it to exit."""
        self.editor.edit(self._existing_path(name))

    def _entries(self) -> Iterator[os.DirEntry]:
        for entry in os.scandir(self.conf.memo_dir()):
            if entry.is_file() and entry.name.endswith('.txt'):
                yield entry

    def names(self) -> List[str]:
        """Returns the names of all memos, in directory order.

        Only regular files with a ``.txt`` extension directly inside the memo directory count as memos.
        """
        return [entry.name[:-4] for entry in self._entries()]

    def infos(self) -> List[MemoInfo]:
        """Returns details of all memos, sorted by name."""
        infos = [MemoInfo.for_path(entry.path) for entry in self._entries()]
        infos.sort(key=attrgetter('name'))
        return infos

    def select(self) -> Optional[str]:
        """Asks the user to pick a memo. Returns None if there are none or nothing was picked.

        May raise :exc:`memo.interact.SelectorError`.
        """
        names = self.names()
        if not names:
            return None
        return self.selector.select(names)

    def resolve(self, name: Optional[str]) -> Optional[str]:
        """Returns the given name, or asks the user to pick one if it is None."""
        if name is not None:
            return name
        return self.select()

    def set_editor(self, command: str) -> None:
        self.conf.set_editor(command)

    def get_editor(self) -> str:
        return self.conf.get_editor()
