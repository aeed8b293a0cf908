from config import DEFAULT_RECONSTRUCTION, ReconstructionConfig
from main import main
from tomography.filters import FilterType


def test_default_config():
    assert DEFAULT_RECONSTRUCTION.num_angles == 180
    assert DEFAULT_RECONSTRUCTION.filter_type is FilterType.RAM_LAK
    assert ReconstructionConfig(workers=4).workers == 4


def test_demo_runs_on_small_disc():
    assert main(["--size", "16", "--angles", "8", "--phantom", "disc", "--filter", "cosine"]) == 0


def test_demo_reports_invalid_angles():
    assert main(["--size", "16", "--angles", "0", "--phantom", "disc"]) == 1
