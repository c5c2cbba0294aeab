from coinage.domain.monetary.moneybag import Moneybag

# Single-coin bags, usable as building blocks: `3 * Livre + 2 * Solidus`
Livre = Moneybag(1, 0, 0)
Solidus = Moneybag(0, 1, 0)
Denier = Moneybag(0, 0, 1)
