import random

import pytest

from isoalign.simulation import AbundanceSpec, SimulatedFeatureListFactory, SimulatedPatternSpec


@pytest.fixture(scope="session", autouse=True)
def random_seed():
    random.seed(1234)
    return


@pytest.fixture(scope="module")
def simulated_patterns():
    mz_list = [200.0512, 350.1021, 350.1081, 524.3712, 810.6009]
    rt_list = [30.0, 60.0, 90.0, 120.0, 120.5]
    charge_list = [1, 1, 2, 1, 2]
    specs = list()
    for mz, rt, charge in zip(mz_list, rt_list, charge_list):
        spec = SimulatedPatternSpec(
            mz=mz,
            rt=rt,
            charge=charge,
            n_isotopologues=3,
            abundance=AbundanceSpec(mean=1000.0, prevalence=0.8),
            mz_std=0.0005,
            rt_std=0.5,
        )
        specs.append(spec)
    return specs


@pytest.fixture(scope="module")
def feature_list_factory(simulated_patterns):
    return SimulatedFeatureListFactory(patterns=simulated_patterns)
