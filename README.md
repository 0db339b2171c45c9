# rynshell

An interactive command shell for the terminal. It runs programs, chains them
with `;`, `&&` and `||`, connects them with `|` pipelines, expands aliases,
and draws a configurable prompt that can show the time, user, host, current
directory, how long the last command took, and the state of a git repository.

## Installing

    pip install .

## Starting the shell

    ryn

Type commands as in any shell:

    ls -l | grep py
    make && echo done || echo failed
    cd ~/projects; ls

Built-in commands:

- `cd [dir]` changes the working directory (the home directory when no
  argument is given).
- `exit` leaves the shell. Ctrl-D does the same and prints `exit`.

Ctrl-C at the prompt discards the current line instead of leaving the shell.

Single and double quotes group words containing spaces; the quote characters
themselves are dropped. A `~` at the start of an unquoted word is replaced by
the home directory. On Windows, `echo`, `dir`, `cls`, `set`, `pause` and
`type` are run through `cmd /C`.

While typing, a grey suggestion is shown from the most recent history entry
that starts with what has been typed so far; Tab completes the word under the
cursor as a file name. History is kept in `ryn/history.txt` in the user data
directory.

## Configuration

The shell reads `ryn/config` from the user configuration directory. Each line
is `key = value`; blank lines and lines starting with `#` are ignored.
Surrounding double quotes around a value are removed.

    # prompt placeholders: {time24} {user} {host} {dir} {compactdir} {git} {timetaken}
    prompt = "{time24} {user ifnotgit} {host ifnotgit}{git} > "
    cursor = blinkingbar
    alias ll = "ls -l"

- `prompt` sets the prompt template (the example above is the default).
  - `{time24}`: the current time as `HH:MM:SS`.
  - `{user}`, `{host}`: the `USER` environment variable and the host name.
  - `{dir}`, `{compactdir}`: the working directory, in full or as the first
    letter of each path component.
  - `{git}`: repository name, branch and `[✔]` or `[!]` for a clean or dirty
    working tree; empty outside a repository.
  - `{timetaken}`: how long the last command ran, such as `1m 5s`; empty when
    it took under a second.
  - Adding ` ifnotgit` inside one of `user`, `host`, `dir`, `time24`,
    `timetaken` or `compactdir`, such as `{user ifnotgit}`, hides it while
    inside a git repository.
- `cursor` is one of `blinkingblock`, `steadyblock`, `blinkingunderline`,
  `steadyunderline`, `blinkingbar` (the default), `steadybar`.
- `alias NAME = "command"` replaces `NAME` when it is the first word of a
  command. If the alias is itself a chain or pipeline, it is run as it stands
  and the remaining words of the command are not used.

When a line is malformed, the shell reports the line and falls back to the
default configuration.

## Using it from Python

    from rynshell.parser import tokenize, parse_expr
    from rynshell.eval import parse_and_execute
    from rynshell.config import parse_config

    expr = parse_expr(tokenize("echo hi && echo there"))
    parse_and_execute("echo hello | tr a-z A-Z", {})
    config = parse_config('alias ll = "ls -l"\ncursor = steadybar')

`parse_expr` raises `rynshell.parser.ParseError` and `parse_config` raises
`rynshell.config.ConfigSyntaxError` on malformed input.
`rynshell.prompt.parse_prompt(template, seconds)` expands a prompt template.

## What it does not do

There is no input or output redirection (`<`, `>`), no background jobs (`&`),
no environment variable expansion and no wildcard expansion; such characters
are passed to programs as ordinary words.

## Running the tests

    pip install .[test]
    pytest