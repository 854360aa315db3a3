"""
Animal market: species catalog and the daily selection of offers.

The catalog is a fixed JSON table of ten species templates covering every
diet/climate combination. Each rotation shows up to ``MARKET_SIZE`` distinct
templates picked through a uniform permutation, drawn from a freshly seeded
generator so that no modulo bias creeps in.
"""

from pathlib import Path
from typing import List, Optional

import numpy as np
from pydantic import BaseModel, Field, RootModel

from ZooSim_V1.data.zoo_params import MARKET_SIZE
from ZooSim_V1.domain.animal import Animal
from ZooSim_V1.domain.types import Climate, Diet, Sex
from ZooSim_V1.utils import load_and_validate


class SpeciesTemplate(BaseModel):
    species: str
    name: str
    age_days: int = Field(ge=0)
    weight: float = Field(gt=0)
    climate: Climate
    price: int = Field(gt=0)
    diet: Diet


class SpeciesCatalog(RootModel[List[SpeciesTemplate]]):
    pass


class MarketOffer(BaseModel):
    """One animal for sale: a catalog template with a drawn sex."""

    template: SpeciesTemplate
    sex: Sex

    @property
    def price(self) -> int:
        return self.template.price

    def to_animal(self, animal_id: int) -> Animal:
        return Animal(
            animal_id=animal_id,
            species=self.template.species,
            name=self.template.name,
            age_days=self.template.age_days,
            weight=self.template.weight,
            climate=self.template.climate,
            price=self.template.price,
            diet=self.template.diet,
            sex=self.sex,
        )


data_path = Path(__file__).parent.parent / "data" / "species.json"


def load_catalog(json_path: Optional[Path] = None) -> List[SpeciesTemplate]:
    """Load the species catalog and validate it with Pydantic.

    Args:
        json_path: Optional override of the bundled ``species.json``.

    Returns:
        The validated list of species templates, in file order.
    """
    catalog = load_and_validate(Path(json_path) if json_path else data_path, SpeciesCatalog)
    return list(catalog.root)


def sample_market(
    catalog: List[SpeciesTemplate],
    rng: np.random.Generator,
    size: int = MARKET_SIZE,
) -> List[MarketOffer]:
    """Draw up to ``size`` distinct offers from the catalog.

    Args:
        catalog: Species templates to choose from.
        rng: Session generator, only used to seed the shuffle.
        size: Maximum number of offers.

    Returns:
        Offers in shuffled order, without duplicate templates.
    """
    shuffler = np.random.default_rng(int(rng.integers(0, 2**32)))
    indices = shuffler.permutation(len(catalog))[: min(size, len(catalog))]
    return [
        MarketOffer(
            template=catalog[int(i)],
            sex=Sex.MALE if int(shuffler.integers(0, 2)) == 0 else Sex.FEMALE,
        )
        for i in indices
    ]
