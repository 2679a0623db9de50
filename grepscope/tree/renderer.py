"""Render selected lines with markers, numbers and ellipses."""

from ..models import ContextOptions

ELLIPSIS = "⋮...\n"
COLOR_RESET = "\033[0m"
LOI_MARKER = "█"
LINE_MARKER = "│"


def line_marker(is_interesting: bool, options: ContextOptions) -> str:
    if is_interesting and options.mark_lois:
        if options.color:
            return f"\033[31m{LOI_MARKER}{COLOR_RESET}"
        return LOI_MARKER
    return LINE_MARKER


def render(
    lines: list[str],
    show_lines: set[int],
    lines_of_interest: set[int],
    highlights: dict[int, str],
    options: ContextOptions,
) -> str:
    if not show_lines:
        return ""

    out = []
    if options.color:
        out.append(f"{COLOR_RESET}\n")

    # Armed while the previous line was shown (or at the top of the file)
    dots = 0 not in show_lines
    for i, line in enumerate(lines):
        if i not in show_lines:
            if dots:
                out.append(ELLIPSIS)
                dots = False
            continue

        marker = line_marker(i in lines_of_interest, options)
        text = highlights.get(i, line)
        if options.line_number:
            out.append(f"{i + 1:3}{marker}{text}\n")
        else:
            out.append(f"{marker}{text}\n")
        dots = True

    return "".join(out)
