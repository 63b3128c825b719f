import logging

from .settings import POOL_CAPACITY

logger = logging.getLogger(__name__)


class Pool:
    """Fixed-capacity slab of entities, each carrying an ``active`` flag.

    Slots are built once from ``factory`` and recycled; nothing is allocated
    after construction. ``reserve`` hands out the lowest-index free slot.
    """

    def __init__(self, factory, capacity=POOL_CAPACITY, name=None):
        self.name = name or getattr(factory, "__name__", "pool")
        self.capacity = capacity
        self.objects = [factory() for _ in range(capacity)]
        self.number_actives = 0

    def __iter__(self):
        return iter(self.objects)

    def __len__(self):
        return self.capacity

    def actives(self):
        return [obj for obj in self.objects if obj.active]

    def reserve(self):
        for obj in self.objects:
            if not obj.active:
                obj.active = True
                self.number_actives += 1
                return obj
        logger.debug("%s pool exhausted (%d slots)", self.name, self.capacity)
        return None

    def release(self, obj):
        if not obj.active:
            return
        obj.active = False
        self.number_actives -= 1

    @property
    def full(self):
        return self.number_actives >= self.capacity
