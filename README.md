# zesh

The front end of a small command shell, as a Python library. It walks over a
line of input one character at a time, splits it into words the way a shell
does (spaces and tabs separate words, single and double quotes group them),
and holds the result in simple syntax tree nodes. A set of small string,
number, memory, list and output helpers comes with it.

## Installing

```
pip install .
```

## Reading input: `zesh.source`

`Source` wraps one line of text with a cursor that starts just before the
first character.

- `get_next_char()` moves the cursor on and returns the character under it,
  or `EOS` (None) at the end.
- `peek_next_char()` returns the next character without moving.
- `give_back_char()` steps the cursor back by one.
- `skip_white_spaces()` moves past any white space that follows.
- `size` and `at_end` report the buffer length and whether the cursor has
  passed the last character.

## Splitting into words: `zesh.scanner`

- `tokenize(src)` returns the next `Token`, or `EOF_TOKEN` (empty text) when
  no word is left. An unterminated quote also ends the input.
- `iter_tokens(src)` yields tokens until the end of input.
- `fill_token(src)` reads the raw text of the next word; it returns None when
  the input is exhausted or a quote is never closed.

Quotes are removed from the words they group, and a newline is a token of
its own.

```python
from zesh.source import Source
from zesh.scanner import iter_tokens

print([token.text for token in iter_tokens(Source("ls -l 'my dir'"))])
# ['ls', '-l', 'my dir']
```

## Syntax tree: `zesh.node`

`Node` has a `type` (`NodeType.COMMAND` or `NodeType.VAR`), an optional
string `value` and an ordered list of `children`. `add_child()` appends a
child, `set_str()` sets or clears the value, and `words()` returns the
children's values.

```python
from zesh.node import Node, NodeType

command = Node(NodeType.COMMAND)
for word in ["echo", "hello"]:
    command.add_child(Node(NodeType.VAR, word))
print(command.words())  # ['echo', 'hello']
```

## Helpers: `zesh.libft`

- `charclass`: ASCII character tests (`is_alpha`, `is_digit`, `is_space`, …),
  case conversion and `sign_of`.
- `numeric`: `atoi` and `atol` with 32- and 64-bit wrap-around, `atof`,
  `itoa`, `nbrlen` and an in-place `quicksort` over an inclusive range.
- `memory`: `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`, `memmove` and
  `memset` over bytes-like buffers.
- `strsearch`: `strlen`, `strnlen`, `strchr`, `strrchr`, `strcmp`,
  `strncmp`, `strnstr` and `lastchr`.
- `split`: `split`, `split_space`, `word_counter` and `split_size`.
- `strbuild`: `strlcpy`, `strlcat`, `strdup`, `substr`, `strjoin`,
  `strtrim`, `strmapi` and `striteri`.
- `output`: `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`, and
  `LineReader` with `get_next_line` for reading a stream line by line.
- `lists`: `LinkedList`, a singly linked list with `push_front`,
  `push_back`, `last`, `for_each`, `map` and `clear`.

## What it does not do

The package stops at reading and splitting input. It has no interactive
prompt and installs no command. It does not build command trees from tokens
by itself, search `PATH` for programs or run them, and has no built-in
commands such as `cd` or `exit`.

## Tests

```
pip install .[test]
pytest
```