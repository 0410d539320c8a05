"""Command-line interface for memo."""


import argparse
import json
import sys
from terminaltables import AsciiTable
from memo import __version__
from memo.api import Memos
from memo.interact import SelectorError
from memo.models import InvalidNameError, MemoError, SEPARATOR_WIDTH, separator


COMMANDS = ('create', 'delete', 'update', 'read', 'edit', 'add', 'ls', 'editor', 'set', 'help', 'version')


def _create(args, memos: Memos) -> int:
    memos.create(args.name[0], force=args.force)
    return 0


def _delete(args, memos: Memos) -> int:
    name = memos.resolve(args.name)
    if name is not None:
        memos.delete(name)
    return 0


def _update(args, memos: Memos) -> int:
    memos.update(args.old[0], args.new[0])
    return 0


def _read(args, memos: Memos) -> int:
    name = memos.resolve(args.name)
    if name is None:
        return 0
    content = memos.read(name)
    print(f'{name}\n{separator(name)}')
    print(content)
    print('~' * SEPARATOR_WIDTH)
    return 0


def _edit(args, memos: Memos) -> int:
    name = memos.resolve(args.name)
    if name is not None:
        memos.edit(name)
    return 0


def _add(args, memos: Memos) -> int:
    if not args.content:
        print('Usage: note add <name> <content...>', file=sys.stderr)
        return 2
    memos.add(args.name[0], ' '.join(args.content))
    return 0


def _ls(args, memos: Memos) -> int:
    if args.json:
        print(json.dumps([i.as_json() for i in memos.infos()]))
    elif args.table:
        data = [('Name', 'Size', 'Modified')]
        data.extend((i.name, str(i.size), i.modified.strftime('%Y-%m-%d %H:%M')) for i in memos.infos())
        table = AsciiTable(data)
        table.justify_columns[1] = 'right'
        print(table.table)
    else:
        for name in memos.names():
            print(name)
    return 0


def _editor(args, memos: Memos) -> int:
    print(f"Current editor: '{memos.get_editor()}'")
    return 0


def _set(args, memos: Memos) -> int:
    if len(args.setting) < 2 or not args.setting[0] == 'editor':
        print('Usage: note set editor <editor>')
        return 0
    command = ' '.join(args.setting[1:])
    Memos.for_user().set_editor(command)
    print(f"Editor set to '{command}'")
    return 0


def _version(args, memos: Memos) -> int:
    print(f'note {__version__}')
    return 0


def argparser() -> argparse.ArgumentParser:
    select_help = 'Name of the memo. If omitted, you can pick one interactively with fzf.'

    parser = argparse.ArgumentParser(prog='note', description='Simple memo CLI. Memos are stored in ~/.memo.')
    parser.add_argument('-v', '--version', action='version', version=f'note {__version__}')
    parser.set_defaults(func=None, storage=True)

    subs = parser.add_subparsers(title='Commands')

    p_create = subs.add_parser('create', help='Create a new, empty memo.')
    p_create.add_argument('name', nargs=1)
    p_create.add_argument('-f', '--force', action='store_true',
                          help='Truncate the memo if it already exists. Without this, an existing memo is left '
                               'unchanged.')
    p_create.set_defaults(func=_create)

    p_delete = subs.add_parser('delete', help='Delete a memo. Nothing happens if it does not exist.')
    p_delete.add_argument('name', nargs='?', help=select_help)
    p_delete.set_defaults(func=_delete)

    p_update = subs.add_parser('update', help='Rename a memo. A memo that already has the new name is replaced.')
    p_update.add_argument('old', nargs=1)
    p_update.add_argument('new', nargs=1)
    p_update.set_defaults(func=_update)

    p_read = subs.add_parser('read', help='Print a memo.')
    p_read.add_argument('name', nargs='?', help=select_help)
    p_read.set_defaults(func=_read)

    p_edit = subs.add_parser('edit', help='Open a memo in your editor (see the "set" command).')
    p_edit.add_argument('name', nargs='?', help=select_help)
    p_edit.set_defaults(func=_edit)

    p_add = subs.add_parser('add', help='Append a line to a memo. The words of the content are joined by spaces.')
    p_add.add_argument('name', nargs=1)
    p_add.add_argument('content', nargs=argparse.REMAINDER)
    p_add.set_defaults(func=_add)

    p_ls = subs.add_parser('ls', help='List all memos.')
    p_ls_formats = p_ls.add_mutually_exclusive_group()
    p_ls_formats.add_argument('-j', '--json', action='store_true',
                              help='Output as JSON. The output is a list of objects with the name, path, size, and '
                                   'modification time of each memo, sorted by name.')
    p_ls_formats.add_argument('-t', '--table', action='store_true', help='Format output as a table.')
    p_ls.set_defaults(func=_ls)

    p_editor = subs.add_parser('editor', help='Show the current editor command.')
    p_editor.set_defaults(func=_editor)

    p_set = subs.add_parser('set', help='Change a setting. Currently only "set editor <cmd>" is supported.')
    p_set.add_argument('setting', nargs=argparse.REMAINDER)
    p_set.set_defaults(func=_set, storage=False)

    subs.add_parser('help', help='Show this help.')

    p_version = subs.add_parser('version', help='Show the version.')
    p_version.set_defaults(func=_version, storage=False)

    return parser


def main(args=None) -> int:
    """Runs the tool and returns its exit code.

    args may be an array of string command-line arguments; if absent,
    the process's arguments are used.
    """
    if args is None:
        args = sys.argv[1:]
    if args and not args[0].startswith('-') and args[0] not in COMMANDS:
        print('unknown command')
        return 0
    parser = argparser()
    args = parser.parse_args(args)
    if not args.func:
        parser.print_help()
        return 0
    # commands that never touch the memo directory must work without HOME
    memos = Memos.for_user() if args.storage else None
    try:
        return args.func(args, memos)
    except (InvalidNameError, SelectorError) as e:
        print(e.message, file=sys.stderr)
        return 1
    except MemoError as e:
        print(e.message)
        return 0
