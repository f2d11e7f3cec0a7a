# teleproj/shell/integration.py
"""
Shell wrapper functions for teleproj.

A process cannot change its parent shell's working directory, so jumping
needs a small function in the user's shell that cds into the printed path.
"""
from typing import Dict

from teleproj.constants import SHELL_INVOKE_COMMAND, SHELL_FUNCTION_NAME
from teleproj.errors import UnsupportedShellError

_POSIX_TEMPLATE = """\
{function}() {{
    if [ "$#" -eq 1 ] && [ "${{1#-}}" = "$1" ]; then
        local target
        target="$(command {command} "$1")" && cd "$target"
    else
        command {command} "$@"
    fi
}}
"""

_FISH_TEMPLATE = """\
function {function}
    if test (count $argv) -eq 1; and not string match -q -- '-*' $argv[1]
        set -l target (command {command} $argv[1]); and cd $target
    else
        command {command} $argv
    end
end
"""

SHELL_TEMPLATES: Dict[str, str] = {
    "bash": _POSIX_TEMPLATE,
    "zsh": _POSIX_TEMPLATE,
    "fish": _FISH_TEMPLATE,
}


def render_shell_init(shell: str, function_name: str = SHELL_FUNCTION_NAME) -> str:
    """
    Render the wrapper function for a shell.

    With a single non-option argument the function jumps to the resolved
    project; anything else is passed straight through to teleproj.

    Args:
        shell: One of "bash", "zsh" or "fish".
        function_name: Name of the shell function to define.

    Returns:
        Shell source to be evaluated by the user's shell.

    Raises:
        UnsupportedShellError: If no template exists for the shell.
    """
    template = SHELL_TEMPLATES.get(shell.lower())
    if template is None:
        raise UnsupportedShellError(shell, sorted(SHELL_TEMPLATES))
    return template.format(function=function_name, command=SHELL_INVOKE_COMMAND)
