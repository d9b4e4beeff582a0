"""Static help for the console commands."""

COMMANDS_HELP = [
    ("help", "prints help for the console."),
    ("export <graph_names_separated_by_commas> <file_path>", "dumps triples from graphs into a file path."),
    ("desc <query>", "prints the execution plan for a query statement."),
    ("load <file_path> <graph_names_separated_by_commas>", "load triples into the specified graphs."),
    ("run <file_with_statements>", "runs all the statements in the file."),
    ("start tracing [trace_file]", "starts tracing queries."),
    ("stop tracing", "stops tracing queries."),
    ("quit", "quits the console."),
]

EXPORT_USAGE = "Wrong syntax\n\n\texport <graph_names_separated_by_commas> <file_path>\n"
LOAD_USAGE = "Wrong syntax\n\n\tload <file_path> <graph_names_separated_by_commas>\n"


def help_lines() -> list[str]:
    """Return the help text, one aligned line per command."""
    width = max(len(usage) for usage, _ in COMMANDS_HELP)
    return [f"{usage.ljust(width)}  - {text}" for usage, text in COMMANDS_HELP]
