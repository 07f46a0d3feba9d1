# 📄 File: garden_planner/modules/garden_layout/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# The garden's rule-keepers: grid math, "does this bed fit here", "is this plant too close",
# and the services that apply those rules before anything is saved.
# 🧪 Purpose (Technical Summary):
# Domain services package. Not re-exported here: domain models import `grid` from this
# package, so importing the services eagerly would be circular.
# 🔗 Dependencies:
# domain models, domain repositories, settings
# 🔄 Connected Modules / Calls From:
# application.handlers, presentation.dependencies

"""
Domain Services

- grid: cell/rect primitives and inch-to-cell conversion
- layout_validator: garden-scale bounds and overlap checks
- spacing_validator: bed-scale Chebyshev spacing checks
- seasons: season derivation and plant-family lookup for rotation
- GardenLayoutService: garden, bed positioning, walkways, gates
- BedService / PlantService: bed and plant catalog lifecycle
- BedPlantingService: place/clear, placement lifecycle, history, rotation
- GardenArchiveService: yearly archive and restore replay
"""
