"""Monetary domain package.

This package contains the livre / solidus / denier coinage: the `Moneybag`
holding independent counts of each coin, the `Value` of a bag expressed in
deniers, and the fixed exchange rates between the denominations.
"""
