from .shared import printf
from .table import Empty, Entry, HashTable, Slot, Tombstone


def print_table(table: HashTable, name: str):
    printf("== {0:s} ==\n", name)
    printf(
        "capacity {0:d} count {1:d} load {2:d}%\n",
        table.capacity,
        table.count,
        table.load(),
    )

    for index, slot in enumerate(table.slots):
        print_slot(slot, index)


def print_slot(slot: Slot, index: int):
    printf("{0:04d} ", index)
    match slot:
        case Empty():
            printf("EMPTY\n")
        case Tombstone():
            printf("TOMBSTONE\n")
        case Entry(key=key, value=value):
            printf("{0!r} => {1!r}\n", key, value)
