from TourEngine.utils.taxonomy import ConstructionFamily

__all__ = ["ConstructionFamily"]
