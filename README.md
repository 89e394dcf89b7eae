# pipex

`pipex` connects an input file, a chain of commands and an output file.
It does what this shell line does:

```sh
< infile cmd1 | cmd2 | ... | cmdN > outfile
```

## Installing

```sh
pip install .
```

## Usage

Pass an input file, two or more commands and an output file:

```sh
pipex infile "grep -v foo" "wc -l" outfile
```

The same entry point can be run as `python -m pipex.cli`.

The output file is created if it is missing and truncated if it exists.
It is opened before the input file is read. If the input file cannot be
read, pipex prints `<infile>: <reason>` on standard error. The commands
still run, with empty input.

Each command's standard output is sent to the next command's standard
input. The last command writes to the output file. pipex waits for every
command to finish. It then exits with status 0, whatever the commands'
own exit statuses were.

### Here-documents

If the first argument is `here_doc`, the second argument is a limiter.
Input is then read from standard input, line by line. Reading stops at
the first line that is the limiter followed by one newline character, or
at end of input. The limiter line is not passed on. The output file is
appended to rather than truncated:

```sh
pipex here_doc EOF "cat" "tr a-z A-Z" outfile
```

This is the same as:

```sh
cmd1 << EOF | ... | cmdN >> outfile
```

### Quoting

Each command is split on spaces. To keep spaces inside one argument, put
the argument in single quotes, for example `"awk '{print $1}'"`. An empty
quoted run such as `''` gives no argument. A quote that follows unquoted
text directly starts a new argument. If a command's single quotes do not
pair up, pipex reports it as `command not found: <whole command>`.

### Command lookup

A command whose name begins with `/` is run as given. So is any command
when the environment is empty. Any other command is looked up in the
directories of `PATH`, in order, and the first executable match is used.

Every command is checked before the output file is opened and before
anything runs. If a command cannot be found, pipex prints
`command not found: <name>` on standard error and exits with status 1.

If there are too few arguments, pipex prints
`invalid number of arguments` on standard error and exits with status 1.
If the output file cannot be opened, pipex prints `pipex: <error>` and
exits with status 1.

## Using it from Python

```python
import os

from pipex.cli import parse_arguments, run_pipeline
from pipex.splitting import count_words, split_command

split_command("awk '{print $1}'")   # ['awk', '{print $1}']
count_words("ls -l")                # 2

invocation = parse_arguments(["infile", "cat", "wc -l", "outfile"])
run_pipeline(invocation, os.environ)
```

- `pipex.splitting` provides `split_command` and `count_words`.
  `split_command` raises `QuoteError` on unbalanced quotes.
  `count_words` returns 0 for unbalanced quotes.
- `pipex.commands` provides `search_path`, `find_executable`,
  `check_access`, `read_file`, `read_here_doc` and `report_not_found`.
  `check_access` raises `CommandNotFoundError` for the first command it
  cannot find.
- `pipex.cli` provides `Invocation`, `parse_arguments`, `run_pipeline` and
  `main`. `parse_arguments` raises `ValueError` when there are too few
  arguments. `run_pipeline` takes an optional text stream for here-document
  input, which defaults to standard input.

## What it does not do

pipex is not a shell. It does not expand variables or globs, and it does
not handle double quotes, backslash escapes or redirections inside a
command. Only single quotes and spaces have a special meaning.

## Running the tests

```sh
pip install ".[test]"
pytest
```