"""Walk through coinage basics: building bags, the partial order, values and overflow."""

import logging

from coinage import COIN_NUMBER_MAX, Denier, Livre, Moneybag, OutOfRangeError, Solidus, Value

logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)


def main() -> None:
    purse = 3 * Livre + 2 * Solidus + 5 * Denier
    logger.info(f"Purse holds {purse}, worth {Value(purse)} deniers")

    alms = Moneybag(0, 25, 0)
    logger.info(f"Comparing {purse} with {alms}: {purse.compare(alms).name}")
    logger.info(f"Comparing their values: {Value(purse).compare(Value(alms)).name}")

    hoard = Moneybag(COIN_NUMBER_MAX, 0, 0)
    try:
        hoard += Livre
    except OutOfRangeError as e:
        logger.warning(f"Could not add a livre to the hoard ({e.operation.name}): {e}")
    logger.info(f"Hoard is unchanged: {hoard!r}")


if __name__ == "__main__":
    main()
