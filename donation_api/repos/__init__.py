from donation_api.repos.base import DonationStore
from donation_api.repos.inmemory import InMemoryDonationStore
from donation_api.repos.mongo import MongoDonationStore

__all__ = ["DonationStore", "InMemoryDonationStore", "MongoDonationStore"]
