"""
Module for reading the network gas price.
"""

from ethsnap.fetcher.gas.service import GasService
