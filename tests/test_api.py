from pathlib import Path
import pytest
from memo.api import Memos
from memo.conf import MemoConf
from memo.interact import Editor, Selector
from memo.models import InvalidNameError, MemoExistsError, MemoNotFoundError


class FakeSelector(Selector):
    def __init__(self, choice):
        self.choice = choice
        self.offered = None

    def select(self, names):
        self.offered = names
        return self.choice


class FakeEditor(Editor):
    def __init__(self):
        self.edited = []

    def edit(self, path):
        self.edited.append(path)
        with open(path, 'a') as file:
            file.write('edited\n')


def memos(selector=None, editor=None):
    return Memos(MemoConf(root='/memos'), selector=selector, editor=editor)


def test_for_user(fs, monkeypatch):
    monkeypatch.delenv('MEMO_DIR', raising=False)
    monkeypatch.setenv('HOME', '/home/someone')
    assert Memos.for_user().conf == MemoConf(root='/home/someone/.memo')


def test_create(fs):
    m = memos()
    assert m.create('todo') == '/memos/todo.txt'
    assert Path('/memos/todo.txt').read_text() == ''
    assert m.read('todo') == ''


def test_create_existing(fs):
    fs.create_file('/memos/todo.txt', contents='keep')
    m = memos()
    with pytest.raises(MemoExistsError):
        m.create('todo')
    assert Path('/memos/todo.txt').read_text() == 'keep'
    m.create('todo', force=True)
    assert Path('/memos/todo.txt').read_text() == ''


def test_delete(fs):
    m = memos()
    m.create('todo')
    assert m.delete('todo')
    assert not Path('/memos/todo.txt').exists()
    assert not m.delete('todo')
    with pytest.raises(MemoNotFoundError):
        m.read('todo')
    with pytest.raises(MemoNotFoundError):
        m.edit('todo')


def test_update(fs):
    fs.create_file('/memos/a.txt', contents='from a')
    m = memos()
    assert m.update('a', 'b') == '/memos/b.txt'
    assert m.read('b') == 'from a'
    with pytest.raises(MemoNotFoundError):
        m.read('a')


def test_update_overwrites(fs):
    fs.create_file('/memos/a.txt', contents='from a')
    fs.create_file('/memos/b.txt', contents='from b')
    memos().update('a', 'b')
    assert Path('/memos/b.txt').read_text() == 'from a'
    assert not Path('/memos/a.txt').exists()


def test_update_missing(fs):
    fs.create_file('/memos/b.txt', contents='from b')
    with pytest.raises(MemoNotFoundError):
        memos().update('a', 'b')
    assert Path('/memos/b.txt').read_text() == 'from b'


def test_add(fs):
    m = memos()
    m.create('todo')
    m.add('todo', 'hello')
    assert m.read('todo') == 'hello\n'
    m.add('todo', 'world')
    assert m.read('todo') == 'hello\nworld\n'
    with pytest.raises(MemoNotFoundError):
        m.add('other', 'hello')
    assert not Path('/memos/other.txt').exists()


def test_edit(fs):
    editor = FakeEditor()
    m = memos(editor=editor)
    m.create('todo')
    m.edit('todo')
    assert editor.edited == ['/memos/todo.txt']
    assert m.read('todo') == 'edited\n'


def test_edit_uses_preference(fs, mocker):
    run = mocker.patch('subprocess.run')
    m = memos()
    m.create('todo')
    m.set_editor('nano')
    m.edit('todo')
    run.assert_called_once_with(['nano', '/memos/todo.txt'])


def test_names(fs):
    m = memos()
    for name in ['x', 'y', 'z']:
        m.create(name)
    m.set_editor('nano')
    fs.create_file('/memos/notes.md')
    fs.create_dir('/memos/subdir.txt')
    fs.create_file('/memos/subdir.txt/nested.txt')
    assert sorted(m.names()) == ['x', 'y', 'z']


def test_infos(fs):
    fs.create_file('/memos/b.txt', contents='12345')
    fs.create_file('/memos/a.txt')
    infos = memos().infos()
    assert [i.name for i in infos] == ['a', 'b']
    assert [i.size for i in infos] == [0, 5]
    assert infos[1].path == '/memos/b.txt'


def test_invalid_names(fs):
    fs.create_file('/secret.txt', contents='hidden')
    m = memos()
    with pytest.raises(InvalidNameError):
        m.read('../secret')
    with pytest.raises(InvalidNameError):
        m.delete('../secret')
    with pytest.raises(InvalidNameError):
        m.update('../secret', 'mine')
    assert Path('/secret.txt').exists()


def test_select(fs):
    selector = FakeSelector('b')
    m = memos(selector=selector)
    assert m.select() is None
    assert selector.offered is None
    m.create('a')
    m.create('b')
    assert m.select() == 'b'
    assert sorted(selector.offered) == ['a', 'b']


def test_resolve(fs):
    m = memos(selector=FakeSelector(None))
    m.create('a')
    assert m.resolve('given') == 'given'
    assert m.resolve(None) is None
    m.selector = FakeSelector('a')
    assert m.resolve(None) == 'a'
