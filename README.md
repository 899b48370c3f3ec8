# wheelrt

Building blocks for the Wheel language: a character cursor, token kinds,
a block-based arena, a small vector with inline storage, AST node types and
an interpreter for global definitions and `println`.

## Modules

| Module | What it holds |
| --- | --- |
| `wheelrt.cursor` | `Cursor`, `EOF_CHAR`: steps through source text one character at a time |
| `wheelrt.kind` | `TokenKind`, `Token`, `to_string` |
| `wheelrt.logging_utils` | `not_null`, `NullValueError`, `debug_print`, `eat_all_if` |
| `wheelrt.arena` | `Arena`: grows in blocks, reusable after `reset()` |
| `wheelrt.small_vec` | `SmallVec`: a vector with an inline capacity that spills into an arena |
| `wheelrt.nodes` | `NodeKind` and the AST node classes |
| `wheelrt.interpreter` | `WheelInterpreter`, `Value`, `Operand`, runtime statements and errors |

## Walking through source text

```python
from wheelrt.cursor import Cursor

cursor = Cursor("abc")
cursor.first()      # 'a'
cursor.bump()       # 'a', and the cursor moves on
cursor.previous()   # 'a'
cursor.advance(999) # never runs past the end
cursor.is_eof()     # True
cursor.first()      # '\0' once the input is exhausted
```

## Tokens

`Token` is a frozen record of a `TokenKind`, its text and its `[start, end)`
offsets. `to_string(kind)` gives the kind's display name (`"EOF"` for
`TokenKind.EOF_`, `"IDENTIFIER"` for a value that is no kind at all).

## Arena and SmallVec

```python
from wheelrt.arena import Arena
from wheelrt.small_vec import SmallVec

arena = Arena(1024)          # blocks are never smaller than 4096
node = arena.allocate(dict, name="x")
arena.used_size()            # bytes reserved so far
arena.reset()                # blocks are kept and reused
arena.block_count()          # 1

items = SmallVec(arena, item_size=8)   # 512 items fit inline
items.push_back(1)
items.on_stack()             # True until the inline buffer is full
```

A factory may carry `arena_size` and `arena_alignment` attributes to state
how much room its objects take; otherwise `sys.getsizeof` and an alignment of
8 are used.

## Running a program

`WheelInterpreter.execute` takes executable statements, runs them in order
and returns whether all of them succeeded. A failing statement is recorded
and skipped; the run carries on with the next one.

```python
from wheelrt.interpreter import (
    DefineGlobalStatement, Operand, OperandKind, PrintlnStatement,
    Value, WheelInterpreter,
)

x = 1
program = [
    DefineGlobalStatement(None, x, Operand(OperandKind.Constant, constant=Value.from_int(42))),
    PrintlnStatement(None, "x = {}", (Operand(OperandKind.Binding, binding=x),)),
]

interpreter = WheelInterpreter()
interpreter.execute(program)   # prints "x = 42", returns True
interpreter.find_value(x)      # Value(kind=ValueKind.Int, int_value=42, string_value='')
interpreter.errors             # ()
```

Output goes to `sys.stdout` unless a text stream is passed to
`WheelInterpreter(output=...)`. Runtime error codes are those of
`RuntimeErrorCode`: duplicate binding (4001), unsupported statement (4002)
and unknown binding (4003); `runtime_error_message(code)` gives the text
stored in each `RuntimeError`.

## What this package does not do

- It has no lexer that turns text into tokens, no parser and no semantic
  analysis: statements for the interpreter and AST nodes are built directly.
- It does not map offsets to lines and columns, and does not format errors
  with source lines and markers.
- It installs no command-line program for running Wheel source files.