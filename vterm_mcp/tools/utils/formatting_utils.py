import json
from typing import Dict, List

from vterm_mcp.commands import CommandResult
from vterm_mcp.models.session import TerminalLine


def format_command_result(result: CommandResult, prompt: str, next_prompt: str) -> str:
    """
    Format a command result as structured JSON for LLM consumption.

    `prompt` is the prompt the command was typed at, `next_prompt` the one
    shown afterwards (they differ after `cd`).
    """
    return json.dumps({
        "status": "success",
        "prompt": prompt,
        "output": result.output_lines,
        "clear_screen": result.clear_screen,
        "cwd": result.new_file_system.current_path,
        "next_prompt": next_prompt,
    }, indent=2)


def format_tree(tree_data: List[Dict] | None, root_path: str, error: str = "No such file or directory") -> str:
    """
    Format a subtree listing as structured JSON for LLM consumption.

    A `tree_data` of None means the root could not be listed; `error` says why.
    """
    if tree_data is None:
        return json.dumps({
            "status": "error",
            "root": root_path,
            "message": error,
            "tree": []
        }, indent=2)

    if not tree_data:
        return json.dumps({
            "status": "empty",
            "root": root_path,
            "message": "Nothing to list",
            "tree": []
        }, indent=2)

    tree_items = []
    for item in tree_data:
        tree_items.append({
            "name": item["name"],
            "type": "directory" if item["is_dir"] else "file",
            "depth": item["depth"],
            "path": item["path"],
            "size": item["size"],
            "permissions": item["permissions"],
        })

    return json.dumps({
        "status": "success",
        "root": root_path,
        "count": len(tree_items),
        "tree": tree_items
    }, indent=2)


def format_history(history: List[str]) -> str:
    return json.dumps({"count": len(history), "history": history}, indent=2)


def format_screen(transcript: List[TerminalLine]) -> str:
    """Render the transcript the way the terminal would show it."""
    lines = []
    for line in transcript:
        if line.kind == "input":
            lines.append(f"{line.prompt} {line.content}")
        else:
            lines.append(line.content)
    return "\n".join(lines)
