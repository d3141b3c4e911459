from typing import Iterable

from xmldebug.models import DumpLine, DumpOptions


class DumpFormatter:
    """
    Joins the header and the accumulated dump lines into the final text.
    """

    @staticmethod
    def header(item_count: int) -> str:
        suffix = "" if item_count == 1 else "s"
        return f"SimpleXML object ({item_count} item{suffix})"

    @staticmethod
    def format(item_count: int, lines: Iterable[DumpLine], options: DumpOptions) -> str:
        """
        Args:
            item_count (int): Number of root items that were dumped.
            lines (Iterable[DumpLine]): Body lines in output order.
            options (DumpOptions): Supplies the indent unit and line terminator.

        Returns:
            str: Header plus indented body, every line terminated.
        """
        eol = options.line_terminator
        out = [DumpFormatter.header(item_count) + eol]
        for line in lines:
            out.append(options.indent * line.depth + line.text + eol)
        return "".join(out)
