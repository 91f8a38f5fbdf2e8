# soshell

A small interactive shell for POSIX systems. It runs external programs joined
by pipes (`|`), with one redirection per command (`>`, `>>`, `<`, `2>`) and
background jobs (a trailing `&`). It also has built-in commands for working
with files, file descriptors and bit-level arithmetic. Messages are in
Portuguese.

## Installing

```
pip install .
```

## Running

```
soshell
```

The shell shows the prompt `SOSHELL: Introduza um comando : prompt> ` and
reads one command per line. End the session with `sair` or Ctrl+D.

## Built-in commands

| Command | What it does |
|---|---|
| `sair` | leave the shell |
| `42...` (any word starting with `42`) | print the answer to life, the universe and everything |
| `obterinfo` | print the shell's version |
| `PS1=<text>` | change the prompt |
| `quemsoueu` | run `id` and show its output |
| `cd [dir \| ~ \| $HOME \| -]` | change directory; `cd -` goes back and prints the directory; sets `OLDPWD` and `PWD` |
| `socp src dst [blksize]` | copy a file in blocks (1024 bytes by default) |
| `calc a op b` | arithmetic with `+ - * / ^`, results to three decimals |
| `bits a op [b]` | 16-bit unsigned `& \| ^ ~ << >>` (`~` takes one operand) |
| `displayBitOps a b` | table of AND, OR, XOR and AND-NOT in binary, decimal, octal and hex |
| `isjpeg file` | check a file's JPEG signature |
| `isValid fd` | tell whether a file descriptor is open |
| `openfile file` | open a file read-only and print its descriptor |
| `read fd n` | read up to `n` bytes (at most 2048) and print them as ASCII and hex |
| `closefd fd` | close a file descriptor |
| `fileinfo` | show stdout's descriptor, the descriptor limit and the open descriptors below 64 |
| `avisotemp msg s` | wait `s` seconds, then print a warning on standard error |
| `aviso msg s`, `avisorepetido msg s` | the same, in a background thread |
| `socpthread src dst [blksize]` | copy a file in a background thread and log it |
| `InfoCopias` | list the logged background copies (up to 100, oldest slots overwritten) |
| `maior f1 f2` | name the larger of two files, in KB |
| `setx file` | give the owner execute permission |
| `removerl file` | remove read permission from group and others |
| `sols [dir]` | list a directory with inode, size and modification time |

Anything else is run as an external program, for example:

```
ls -l | grep py > list.txt
sleep 10 &
```

A background job prints `[BG] Processo iniciado com PID: <pid>`.

## Using it as a library

The pieces of the shell can be used on their own:

```python
from soshell.parse import parse
from soshell.calc import calc, bits, CalcError
from soshell.bitops import format_bits, display_bit_ops

parse("ls  -l\t/tmp")        # ['ls', '-l', '/tmp']
calc("2", "+", "3")          # 'Resultado calc 2.000 + 3.000 = 5.000'
bits("5", "&", "3")          # 'Resultado bits 5 & 3 = 1'
format_bits(5, 0x8000)       # '0000000000000101'
calc("1", "/", "0")          # raises CalcError
```

Other modules:

- `soshell.socp`: `socp(source, destination, blksize)` and `io_copy` for
  block-wise copying; both return the number of bytes copied.
- `soshell.redirects`: `redirects(args)` splits a trailing redirection off an
  argument list, returning the rest and a `Redirect` (or `None`);
  `Redirect.open()` opens its file with the right flags.
- `soshell.files`: `fd_is_valid`, `open_file`, `close_fd`, `read_fd`,
  `format_bytes`, `file_info` and `is_jpeg`.
- `soshell.fileutils`: `larger_file`, `set_owner_exec`,
  `remove_group_other_read` and `list_directory`.
- `soshell.alerts`: `aviso`, `start_aviso`, `CopyLog` (with `record`,
  `report` and `copy`) and `start_copy`.
- `soshell.execute`: `ultimo`, `split_pipeline` and `execute(args)`, which
  starts a pipeline and returns a `Job` with `pid`, `returncode` and `wait()`.
- `soshell.shell`: `Shell` runs the command loop over any text stream with
  `Shell.run(stdin)`; `Shell.handle_line(line)` processes one line and
  `Shell.builtin(args)` runs a built-in command.

## What it does not do

- No quoting, escaping, globbing or variable expansion: a line is split on
  spaces and tabs only (`cd $HOME` is a special case of `cd`).
- Only the last two arguments of each command are checked for a redirection,
  so a command gets at most one.
- No command history or line editing, and no job control beyond starting a
  job in the background.