"""Podcast detail: loader, season selection and the view combining them."""

from podexplorer.detail.loader import DetailLoader
from podexplorer.detail.seasons import SeasonSelector
from podexplorer.detail.view import DetailView

__all__ = ["DetailLoader", "SeasonSelector", "DetailView"]
