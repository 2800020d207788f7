from kundali_yoga.domain.yoga.detectors.dhana import DhanaYogaDetector
from kundali_yoga.domain.yoga.detectors.mahapurusha import MahapurushaYogaDetector
from kundali_yoga.domain.yoga.detectors.raja import RajaYogaDetector
from kundali_yoga.domain.yoga.detectors.special import SpecialYogaDetector

__all__ = [
    "RajaYogaDetector",
    "DhanaYogaDetector",
    "MahapurushaYogaDetector",
    "SpecialYogaDetector",
]
