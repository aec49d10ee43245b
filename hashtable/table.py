from dataclasses import dataclass

from .hashing import get_hash
from .prime import next_prime
from .shared import fatal, printf


BASE_CAPACITY = 50

# load thresholds, in percent of capacity
MAX_LOAD = 70
MIN_LOAD = 10

ALLOC_FAILED_EXIT = 1


_debug_trace_resize = False


def set_debug_trace_resize(b: bool):
    global _debug_trace_resize
    _debug_trace_resize = b


@dataclass(frozen=True)
class Empty:
    pass


@dataclass(frozen=True)
class Tombstone:
    pass


@dataclass
class Entry:
    key: str
    value: str


Slot = Empty | Tombstone | Entry


@dataclass(frozen=True)
class NotFound:
    pass


def capacity_for(size_index: int) -> int:
    return next_prime(BASE_CAPACITY << size_index)


def new_slots(capacity: int) -> list[Slot]:
    try:
        return [Empty() for _ in range(capacity)]
    except MemoryError:
        fatal(ALLOC_FAILED_EXIT, "could not allocate {0:d} slots", capacity)


@dataclass
class HashTable:
    """Open addressing table of str -> str with double hashing.

    Deleted entries leave a Tombstone so that probe sequences running through
    them keep going. The table grows when the load passes MAX_LOAD on insert
    and shrinks when it drops under MIN_LOAD on delete, never below the
    capacity it was created with.
    """

    size_index: int
    capacity: int
    count: int
    slots: list[Slot]

    def __init__(self) -> None:
        self.size_index = 0
        self.capacity = capacity_for(0)
        self.count = 0
        self.slots = new_slots(self.capacity)

    def __len__(self) -> int:
        return self.count

    def __contains__(self, key: str) -> bool:
        return not isinstance(self.search(key), NotFound)

    def load(self) -> int:
        if self.capacity == 0:
            return 0
        return self.count * 100 // self.capacity

    def insert(self, key: str, value: str) -> bool:
        """Set key to value. Returns True if the key was not present."""
        if self.load() > MAX_LOAD:
            self._resize(1)

        is_new_key = self._place(self.slots, key, value)
        if is_new_key:
            self.count += 1
        return is_new_key

    def search(self, key: str) -> str | NotFound:
        for attempt in range(self.capacity):
            match self.slots[get_hash(key, self.capacity, attempt)]:
                case Empty():
                    return NotFound()
                case Entry(key=k, value=v) if k == key:
                    return v

        return NotFound()

    def delete(self, key: str) -> bool:
        """Remove key. Returns False, changing nothing, if it was absent."""
        # only count drives the shrink check, so tombstones are cleared by the
        # next resize and not before
        if self.load() < MIN_LOAD:
            self._resize(-1)

        for attempt in range(self.capacity):
            index = get_hash(key, self.capacity, attempt)
            match self.slots[index]:
                case Empty():
                    return False
                case Entry(key=k) if k == key:
                    self.slots[index] = Tombstone()
                    self.count -= 1
                    return True

        return False

    def free(self):
        self.size_index = 0
        self.capacity = 0
        self.count = 0
        self.slots = []

    def _place(self, slots: list[Slot], key: str, value: str) -> bool:
        capacity = len(slots)
        tombstone: int | None = None

        for attempt in range(capacity):
            index = get_hash(key, capacity, attempt)
            match slots[index]:
                case Empty():
                    slots[index if tombstone is None else tombstone] = Entry(
                        key, value
                    )
                    return True
                case Tombstone():
                    if tombstone is None:
                        tombstone = index
                case Entry(key=k) as entry if k == key:
                    entry.value = value
                    return False

        if tombstone is not None:
            slots[tombstone] = Entry(key, value)
            return True

        raise KeyError(key)

    def _resize(self, direction: int):
        size_index = self.size_index + direction
        if size_index < 0:
            return

        capacity = capacity_for(size_index)
        slots = new_slots(capacity)
        count = 0
        for slot in self.slots:
            if isinstance(slot, Entry):
                is_new_key = self._place(slots, slot.key, slot.value)
                assert is_new_key
                count += 1
        assert count == self.count

        if _debug_trace_resize:
            printf(
                "resize {0:d} -> {1:d} (count {2:d})\n",
                self.capacity,
                capacity,
                count,
            )

        self.size_index = size_index
        self.capacity = capacity
        self.count = count
        self.slots = slots


def new_table() -> HashTable:
    return HashTable()
