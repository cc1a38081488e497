import logging

from liftminer.LiftMiner import LiftMiner
from liftminer.TransactionFile import TransactionFile


def main():
    logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    # the order history is read from a local json file
    transaction_table = TransactionFile('Data/transaction_table.json').load()

    # a set of item ids that we want to associate with the most frequent other items
    targets = [16935914948]

    miner = LiftMiner(targets=targets, input_data=transaction_table, k=100)

    associations = miner.fit()

    print("Lift of the most frequent items with " + str(targets) + ": \n")

    for record in associations:
        if record.defined:
            print(str(record.a[0]) + ", lift: " + str(record.lift) +
                  ", confidence: " + str(record.confidence) + ", support: " + str(record.support_ab))
        else:
            print(str(record.a[0]) + ", lift: undefined (insufficient data)")


if __name__ == "__main__":
    main()
