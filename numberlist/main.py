import sys
from typing import List, Optional

from numberlist.errors import InvalidArgumentError, ListIndexError
from numberlist.log_config import configure_logging
from numberlist.number_list import NumberList
from numberlist.settings import get_settings


def print_section(name: str):
    print(f"{get_settings().SECTION_DELIM} {name}")


def print_list(lst: NumberList, label: str = ""):
    if label:
        print(f"{label}: ", end="")
    print(f"[{lst}] size={lst.size()}")


# ───────────────────────── tasks ─────────────────────────

def task1_basic_ops():
    print_section("start-task1")

    lst = NumberList()
    print_section("empty-list")
    print(f"empty={lst.is_empty()} size={lst.size()}")

    print_section("add")
    for x in (1.1, 2.5, 3.0, 4.4, 5.5):
        lst.add(x)
    print_list(lst, "after-add")

    print_section("queries")
    print(f"first={lst.first_element()} ends_positive={lst.ends_positive()}")
    print(f"average={lst.average():.2f}")

    lst.add(-1.0)
    print(f"ends_positive-after-negative={lst.ends_positive()}")


def task2_insert_remove():
    print_section("start-task2")

    lst = NumberList([1.1, 2.5, 3.0, 4.4, 5.5])
    print_list(lst, "seed")

    print_section("insert")
    lst.insert(2, 0.5)                     # [1.1 2.5 0.5 3.0 4.4 5.5]
    lst.insert(0, 9.0)                     # [9.0 1.1 ...]
    lst.insert(lst.size(), 7.7)            # [... 5.5 7.7]
    print_list(lst, "after-insert")
    try:
        lst.insert(lst.size() + 1, 0.0)
    except ListIndexError as exc:
        print(f"error={exc}")

    print_section("remove")
    lst = NumberList([1.1, 4.4, 2.2, 1.1, 3.3, 2.2])
    print("ok=" + str(lst.remove(2.2)))   # first 2.2 goes
    print("ok=" + str(lst.remove(2.5)))   # not present
    print_list(lst, "after-remove")

    print_section("fill")
    lst.fill(0.25)
    print_list(lst, "after-fill")
    print(f"average={lst.average()}")


def task3_reorder():
    print_section("start-task3")

    print_section("remove-duplicates")
    lst = NumberList([1.1, 4.4, 2.2, 1.1, 3.3, 2.2, 1.1])
    lst.remove_duplicates()
    print_list(lst, "deduped")

    print_section("rotate-right")
    lst = NumberList([1.1, 2.2, 3.3, 4.4, 5.5])
    lst.rotate_right(2)
    print_list(lst, "by-2")
    lst = NumberList([1.1, 2.2, 3.3, 4.4, 5.5])
    lst.rotate_right(6)
    print_list(lst, "by-6")
    try:
        lst.rotate_right(0)
    except InvalidArgumentError as exc:
        print(f"error={exc}")


# ───────────────────────── entry ─────────────────────────

def main(argv: Optional[List[str]] = None) -> int:
    configure_logging()
    args = sys.argv[1:] if argv is None else argv
    which = args[0] if args else ""
    if which == "task1":
        task1_basic_ops(); return 0
    if which == "task2":
        task2_insert_remove(); return 0
    if which == "task3":
        task3_reorder(); return 0
    # default: run all
    task1_basic_ops()
    task2_insert_remove()
    task3_reorder()
    return 0


if __name__ == "__main__":
    sys.exit(main())
