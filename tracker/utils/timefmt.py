"""Duration formatting for the task list."""


def format_time(total_seconds: int) -> str:
    """Render whole seconds as zero-padded ``HH:MM:SS``.

    Hours are unbounded, so 100 hours renders as ``100:00:00``.
    """
    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60
    seconds = total_seconds % 60
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
