import logging

from liftminer.Associations import AssociationRec, Associations
from liftminer.Corpus import Corpus
from liftminer.Errors import InsufficientData, InvalidInput, LiftMinerError
from liftminer.ItemQClass import most_frequent, mostFrequent
from liftminer.ItemsetRec import ItemsetRec
from liftminer.LiftMiner import LiftMiner, flatten, lift, score
from liftminer.TransactionFile import TransactionFile

logging.getLogger(__name__).addHandler(logging.NullHandler())
