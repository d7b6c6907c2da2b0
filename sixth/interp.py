import argparse
import dataclasses
import logging
import os
import sys
import threading
import traceback
from dataclasses import dataclass
from typing import Any, Callable, Optional

from sixth.data import WordToken, parse_number
from sixth.exceptions import (
    BadWord, EndOfInput, ImmediateInLiteral, SixthError
)
from sixth.reader import TokenReader, location_from
from sixth.runtime import Word
from sixth.stack import DataStack, LiteralStack
from sixth.words import initial_words


log = logging.getLogger(__name__)


# -------------
#  Interpreter
# -------------

@dataclass
class Interpreter:
    reader: Optional[TokenReader] = None
    out: Any = dataclasses.field(default_factory=lambda: sys.stdout)
    # str -> Word
    words: dict = dataclasses.field(default_factory=initial_words)
    stack: DataStack = dataclasses.field(default_factory=DataStack)
    literals: LiteralStack = dataclasses.field(default_factory=LiteralStack)

    commenting: bool = False
    compiling: bool = False
    compiling_name: str = ''
    compiling_body: list = dataclasses.field(default_factory=list)

    # Tasks started by `go`
    tasks: list = dataclasses.field(default_factory=list)
    task_errors: list = dataclasses.field(default_factory=list)
    on_task_error: Optional[Callable[[Exception], None]] = None

    @classmethod
    def from_text(cls, text, **kwargs):
        return cls(reader=TokenReader(text, file='<string>'), **kwargs)

    def read_word(self):
        "The next raw token, for words like : and & that take an argument"
        if self.reader is None:
            raise EndOfInput('no token source')
        return self.reader.read_word()

    def emit(self, line):
        print(line, file=self.out, flush=True)

    def execute_word(self, token):
        """
        Interpret one token. In order: comments, literal collection,
        compiling, and finally plain execution.
        """
        if token == '(':
            self.commenting = True
            return
        if self.commenting:
            if token == ')':
                self.commenting = False
            return

        word = self.words.get(token)

        if len(self.literals) > 0:
            if word is not None:
                if word.immediate and token != ']':
                    raise ImmediateInLiteral(
                        f'cannot use immediate word in literal: {token}',
                        location_from(token)
                    )
                if word.immediate:
                    word.run(self)
                    return
                # Known words go in by name, they don't run
                self.literals.push_on_top(self.token_value(token))
                return
            self.literals.push_on_top(self.number_or_fail(token))
            return

        if word is not None:
            if not self.compiling or word.immediate:
                word.run(self)
            else:
                self.compiling_body.append(self.token_value(token))
            return

        self.stack.push(self.number_or_fail(token))

    @staticmethod
    def token_value(token):
        n = parse_number(token)
        if n is not None:
            return n
        return WordToken(str(token))

    @staticmethod
    def number_or_fail(token):
        n = parse_number(token)
        if n is None:
            raise BadWord(f'bad word: {token}', location_from(token))
        return n

    def begin_definition(self, name):
        self.compiling_name = str(name)
        self.compiling_body = []
        self.compiling = True

    def end_definition(self):
        if not self.compiling:
            raise BadWord('; without a matching :')
        name = self.compiling_name
        self.words[name] = Word(body=tuple(self.compiling_body))
        log.debug('defined %s as %r', name, self.words[name])
        self.compiling_body = []
        self.compiling_name = ''
        self.compiling = False

    def spawn(self, word, name):
        thread = threading.Thread(
            target=self._run_task, args=(word, name),
            name=f'go {name}', daemon=True
        )
        self.tasks.append(thread)
        log.debug('starting task %s', thread.name)
        thread.start()
        return thread

    def _run_task(self, word, name):
        try:
            word.run(self)
        except Exception as e:
            # Anything a task raises is as fatal as it would be in the
            # host loop
            log.debug('task go %s failed: %r', name, e)
            self.task_errors.append(e)
            if self.on_task_error is not None:
                self.on_task_error(e)
        else:
            log.debug('task go %s finished', name)

    def join_tasks(self, timeout=None):
        """
        Wait for the tasks started with `go`, and raise the first error
        any of them hit.
        """
        for thread in list(self.tasks):
            thread.join(timeout)
        if self.task_errors:
            raise self.task_errors[0]

    def run(self):
        "The host loop: feed every token to execute_word until input runs out"
        while True:
            try:
                token = self.read_word()
            except EndOfInput:
                return self
            self.execute_word(token)


def interpret(text, **kwargs):
    return Interpreter.from_text(text, **kwargs).run()


def fatal_task_error(err):
    if isinstance(err, SixthError):
        print(f'error: {err}', file=sys.stderr, flush=True)
    else:
        traceback.print_exception(err)
        sys.stderr.flush()
    os._exit(1)


def arg_parser():
    parser = argparse.ArgumentParser(
        prog='sixth',
        description='Run a sixth program, read from FILE or standard input.',
    )
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='log debug messages to stderr')
    parser.add_argument('file', nargs='?', default='-',
                        help="program to run, or '-' for standard input")
    return parser


def reconfigure(stream):
    # Input is bytes as far as the language cares; keep what isn't utf-8
    # as it is, on the way in and on the way out
    if hasattr(stream, 'reconfigure'):
        stream.reconfigure(errors='surrogateescape')


def main(argv=None):

    args = arg_parser().parse_args(sys.argv[1:] if argv is None else argv)
    path = args.file
    reconfigure(sys.stdout)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    if path == '-':
        reconfigure(sys.stdin)
        reader = TokenReader(sys.stdin, file='<stdin>')
    else:
        try:
            reader = TokenReader(
                open(path, encoding='utf-8', errors='surrogateescape'),
                file=path
            )
        except OSError as e:
            print(f'error: {e}', file=sys.stderr)
            return 1

    interp = Interpreter(reader=reader, on_task_error=fatal_task_error)
    try:
        interp.run()
    except SixthError as e:
        print(f'error: {e}', file=sys.stderr, flush=True)
        return 1
    finally:
        if reader.stream is not sys.stdin:
            reader.stream.close()
    return 0
