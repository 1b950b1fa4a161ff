# pdf/__init__.py
from pathtracer.pdf.pdf import Pdf
from pathtracer.pdf.cosine_pdf import CosinePdf
from pathtracer.pdf.hittable_pdf import HittablePdf
from pathtracer.pdf.mixture_pdf import MixturePdf

__all__ = ["Pdf", "CosinePdf", "HittablePdf", "MixturePdf"]
