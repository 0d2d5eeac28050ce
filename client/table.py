from typing import List, Sequence

from schemas.movie_schema import MovieSchema

MOVIE_COLUMNS = ("Title", "Year", "Duration")


def render_table(headers: Sequence[str], rows: Sequence[Sequence[object]]) -> str:
    """Render rows as a boxed text table; numbers are right aligned."""
    cells = [[str(value) for value in row] for row in rows]
    widths = [len(header) for header in headers]
    for row in cells:
        for index, value in enumerate(row):
            widths[index] = max(widths[index], len(value))

    def line(values: List[str], aligns: List[bool]) -> str:
        padded = [value.rjust(width) if right else value.ljust(width)
                  for value, width, right in zip(values, widths, aligns)]
        return "| " + " | ".join(padded) + " |"

    border = "+" + "+".join("-" * (width + 2) for width in widths) + "+"
    numeric = [bool(rows) and all(isinstance(row[i], (int, float)) for row in rows) for i in range(len(headers))]

    output = [border, line(list(headers), [False] * len(headers)), border]
    output.extend(line(row, numeric) for row in cells)
    output.append(border)
    return "\n".join(output)


def render_movies(movies: Sequence[MovieSchema]) -> str:
    return render_table(MOVIE_COLUMNS, [(m.title, m.year, m.duration) for m in movies])
