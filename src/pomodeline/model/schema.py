from typing import TypedDict

SavedConfiguration = TypedDict(
    "SavedConfiguration",
    {
        "workMinutes": int,
        "breakMinutes": int,
        "longBreakMinutes": int,
        "showSeconds": bool,
        "promptForTask": bool,
    },
    total=False,
)
