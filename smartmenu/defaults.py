"""Built-in demo menu used when the launcher is started without a menu file."""

from __future__ import annotations

from typing import Dict, List

MenuRows = List[List[str]]

DEFAULT_MENU: Dict[str, MenuRows] = {
    "root": [
        ["File Operations", "menu", "fileMenu"],
        ["System Tools", "menu", "systemMenu"],
        ["Text Processing", "menu", "textMenu"],
        ["Debug Tools", "menu", "debugMenu"],
        ["Show Current Directory", "exec", "pwd"],
        ["List Files", "exec", "ls -la"],
        ["Cat", "exec", "cat ${catFile}"],
        ["Quit", "exec", "quit"],
    ],
    "fileMenu": [
        ["Create New File", "exec", "touch ${filename} && echo 'File created: ${filename}'"],
        ["Edit File", "exec", "${editor} ${filename}"],
        ["View File Contents", "menu", "viewMenu"],
        ["Delete Files", "menu", "deleteMenu"],
        ["Back to Main Menu", "menu", "root"],
    ],
    "viewMenu": [
        ["View pyproject.toml", "exec", "cat pyproject.toml || echo 'No pyproject.toml found'"],
        ["View current directory", "exec", "ls -la"],
        ["View hidden files", "exec", "ls -la | grep ' \\.'"],
        ["Back to Main Menu", "menu", "root"],
    ],
    "deleteMenu": [
        ["Delete temp files", "exec", "rm -f *.tmp && echo 'Temp files deleted'"],
        ["Delete log files", "exec", "rm -f *.log && echo 'Log files deleted'"],
        ["Back to Main Menu", "menu", "root"],
    ],
    "systemMenu": [
        ["Show System Info", "exec", "uname -a"],
        ["Show Disk Usage", "exec", "df -h"],
        ["Show Memory Usage", "exec", "free -h"],
        ["Show Running Processes", "exec", "ps aux | head -10"],
        ["Connect to Server", "exec", "ssh ${username}@${serverName}"],
        ["Ping Host", "exec", "ping -c 4 ${hostName}"],
        ["Back to Main Menu", "menu", "root"],
    ],
    "textMenu": [
        ["Count Lines in Files", "menu", "countMenu"],
        ["Search Text", "menu", "searchMenu"],
        ["Back to Main Menu", "menu", "root"],
    ],
    "countMenu": [
        ["Count Python files", "exec", "find . -name '*.py' | wc -l"],
        ["Count all files", "exec", "find . -type f | wc -l"],
        ["Back to Main Menu", "menu", "root"],
    ],
    "searchMenu": [
        ["Search for TODO comments", "exec", "grep -rn 'TODO' . || echo 'No TODO comments found'"],
        ["Search for print calls", "exec", "grep -rn 'print(' . || echo 'No print calls found'"],
        ["Back to Main Menu", "menu", "root"],
    ],
    "debugMenu": [
        ["Show Variables", "debug", "vars"],
        ["Show Config Details", "debug", "config"],
        ["Show Environment", "debug", "env"],
        ["Show Menu Structure", "debug", "menu"],
        ["Show All Debug Info", "debug", "all"],
        ["Back to Main Menu", "menu", "root"],
    ],
}


__all__ = ["DEFAULT_MENU"]
