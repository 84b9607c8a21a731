"""Interactive menu for the contact book."""

from __future__ import annotations

import argparse
import sys
from enum import IntEnum
from typing import Callable, Iterator, TextIO

from practica.contacts import (
    DEFAULT_PATH,
    ContactBook,
    ContactNotFoundError,
    Person,
    format_person,
)

_MENU = (
    "*************************************\n"
    "****** 1.add        2.del       *****\n"
    "****** 3.search     4.modify    *****\n"
    "****** 5.show       6.sort      *****\n"
    "****** 0.exit                   *****\n"
    "*************************************\n"
)

_PROMPTS = (
    "请输入联系人的名字>",
    "请输入联系人的年龄>",
    "请输入联系人的性别>",
    "请输入联系人的电话>",
    "请输入联系人的地址>",
)


class Choice(IntEnum):
    """Menu entries."""

    EXIT = 0
    ADD = 1
    DEL = 2
    SEARCH = 3
    MODIFY = 4
    SHOW = 5
    SORT = 6


def menu() -> str:
    """Return the menu text."""
    return _MENU


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next_token(tokens: Iterator[str]) -> str:
    token = next(tokens, None)
    if token is None:
        raise EOFError
    return token


def _read_person(tokens: Iterator[str], out: TextIO) -> Person:
    fields = []
    for prompt in _PROMPTS:
        out.write(prompt)
        fields.append(_next_token(tokens))
    name, age, sex, tele, addr = fields
    return Person(name, int(age), sex, tele, addr)


def _add(book: ContactBook, tokens: Iterator[str], out: TextIO) -> None:
    book.add(_read_person(tokens, out))
    out.write("增加信息成功\n")


def _delete(book: ContactBook, tokens: Iterator[str], out: TextIO) -> None:
    if not len(book):
        out.write("通讯录没有联系人可以删除\n")
        return
    out.write("请输入要删除的联系人的名字\n")
    name = _next_token(tokens)
    try:
        book.remove(name)
    except ContactNotFoundError:
        out.write("查找的人不存在\n")
        return
    out.write("删除成功\n")


def _search(book: ContactBook, tokens: Iterator[str], out: TextIO) -> None:
    out.write("请输入要查找的联系人>\n")
    name = _next_token(tokens)
    try:
        position = book.index_of(name)
    except ContactNotFoundError:
        out.write("要查找的联系人不存在\n")
        return
    out.write(format_person(book.get(name), position + 1) + "\n")


def _modify(book: ContactBook, tokens: Iterator[str], out: TextIO) -> None:
    out.write("请输入要修改的联系人>\n")
    name = _next_token(tokens)
    try:
        book.index_of(name)
    except ContactNotFoundError:
        out.write("要查找的联系人不存在\n")
        return
    book.modify(name, _read_person(tokens, out))
    out.write("修改信息成功\n")


def _show(book: ContactBook, tokens: Iterator[str], out: TextIO) -> None:
    for position, person in enumerate(book, start=1):
        out.write(format_person(person, position) + "\n")


def _sort(book: ContactBook, tokens: Iterator[str], out: TextIO) -> None:
    book.sort()
    out.write("排序成功\n")


_HANDLERS: dict[Choice, Callable[[ContactBook, Iterator[str], TextIO], None]] = {
    Choice.ADD: _add,
    Choice.DEL: _delete,
    Choice.SEARCH: _search,
    Choice.MODIFY: _modify,
    Choice.SHOW: _show,
    Choice.SORT: _sort,
}


def _finish(book: ContactBook, out: TextIO) -> None:
    try:
        book.save()
    except OSError as err:
        out.write(f"Save_contact: {err}\n")
    out.write("退出程序\n")


def run(book: ContactBook, stdin: TextIO, stdout: TextIO) -> None:
    """Drive the menu until the user exits or input runs out, then save."""
    tokens = _tokens(stdin)
    while True:
        stdout.write(menu())
        stdout.write("请选择:>")
        token = next(tokens, None)
        if token is None:
            break
        try:
            choice = Choice(int(token))
        except ValueError:
            stdout.write("选择错误\n")
            continue
        if choice is Choice.EXIT:
            break
        try:
            _HANDLERS[choice](book, tokens, stdout)
        except EOFError:
            break
        except ValueError as err:
            stdout.write(f"输入无效:{err}\n")
    _finish(book, stdout)


def main(argv: list[str] | None = None) -> int:
    """Run the contact book menu on standard input and output."""
    parser = argparse.ArgumentParser(description="Manage a contact book.")
    parser.add_argument(
        "-f", "--file", default=DEFAULT_PATH, help="record file to load and save"
    )
    args = parser.parse_args(argv)
    book = ContactBook(args.file)
    run(book, sys.stdin, sys.stdout)
    return 0