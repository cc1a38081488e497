import numpy as np


# ############################# Class ItemQElem/ItemQClass #############################
class ItemQElem:
    def __init__(self, item, count=0):
        self.item = item
        self.count = count

    # higher count first, equal counts ordered on ascending item id
    @staticmethod
    def iqeGreater(iqe):
        return -iqe.count, iqe.item

    def __repr__(self):
        return "ItemQElem(item=%r, count=%d)" % (self.item, self.count)


# a queue of items, to be sorted on their frequency in the corpus
class ItemQClass(list):
    def __init__(self):
        list.__init__(self)

    def append(self, count, item):
        new_itemQElem = ItemQElem(item, count)
        super(ItemQClass, self).append(new_itemQElem)

    def sort(self):
        ordered = ItemQClass()
        ordered.extend(sorted(self, key=ItemQElem.iqeGreater))
        return ordered

    def items(self, amount=None):
        if amount is None:
            return [elem.item for elem in self]
        return [elem.item for elem in self[:amount]]


def count_items(items):
    q_class = ItemQClass()

    # object dtype keeps the ids as exact Python ints, whatever their size or sign
    values = np.asarray(list(items), dtype=object)
    if values.size == 0:
        return q_class

    # np.unique returns the distinct ids in ascending order with their exact counts
    unique_items, counts = np.unique(values, return_counts=True)
    for item, count in zip(unique_items.tolist(), counts.tolist()):
        q_class.append(count, item)

    return q_class


# Return the amount most frequently occurring item ids of a list, most frequent first.
# Ties are broken by ascending item id; fewer distinct ids than amount returns them all.
def most_frequent(items, amount=1):
    if amount <= 0:
        return []
    return count_items(items).sort().items(amount)


mostFrequent = most_frequent
