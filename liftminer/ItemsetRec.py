from liftminer.Errors import InvalidInput


# ############################# Class ItemsetRec #############################
# An item set used as a conjunctive condition, with the number of transactions that
# contain every item. Order is kept for reporting, duplicates are dropped.
class ItemsetRec(list):
    def __init__(self, items=(), count=0):
        super().__init__()
        for item in items:
            if item not in self:
                self.append(item)
        self.count = count

    @classmethod
    def of(cls, items):
        itemset = items if isinstance(items, ItemsetRec) else cls(items)
        if not itemset:
            raise InvalidInput("an item set must contain at least one item")
        return itemset

    def with_count(self, count):
        return ItemsetRec(self, count)

    def __repr__(self):
        return "ItemsetRec(%s, count=%d)" % (list.__repr__(self), self.count)
