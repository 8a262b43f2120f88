from __future__ import annotations

from _infra import banner

from kungfu import Error, Ok

from traversals.text import Text, groups, lines, words


def upper_initial(word: Text) -> None:
    # str.title may widen a character ("ß" -> "Ss"); keep those as they are
    word.map(lambda c: c.title() if len(c.title()) == 1 else c, 0)


def main() -> None:
    banner("02_csv_table: indexed queries and updates on text")

    table = Text("id,name\n47,jane doe\n11,joe bloggs")
    rows = lines().except_at(0)

    ids = rows.compose(groups(",").only_at(0)).map(str).map(int)
    print("ids:", ids.collect(table))

    names = rows.compose(groups(",").only_at(1)).compose(words())
    names.traverse(table, upper_initial)
    print(table)

    every_cell = lines().compose(groups(",")).map(str).map(int)
    match every_cell.catching(table, print, on_error=str):
        case Ok(visits):
            print(f"ok: {visits} cells")
        case Error(message):
            print(f"error: {message}")

    wr = ids.traverse_w(table, lambda _: None, entry=lambda i: f"id {i}")
    print(f"log: {list(wr.log)} ({wr.visits} visits)")


if __name__ == "__main__":
    main()
