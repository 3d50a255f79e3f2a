"""Tests for the composite part builder."""

import math

import pytest

from repairgen.config import GenerationOptions
from repairgen.errors import MissingParameterError, UnknownPartTypeError
from repairgen.models.geometry import Archetype
from repairgen.models.spec import Measurement, PartRequest
from repairgen.parts import PartBuilder, build_from_parameters


@pytest.fixture
def builder():
    return PartBuilder()


@pytest.fixture
def preview_builder():
    return PartBuilder(GenerationOptions(exact_boolean=False))


PHONE = {"phone_width": 60, "phone_height": 120, "phone_depth": 10}
BRACKET = {"leg_length_1": 40, "leg_length_2": 60}
CAP = {"outer_diameter": 30, "inner_diameter": 27, "height": 10}


class TestBuildFromParameters:
    """Tests for classification plus generation."""

    def test_deterministic(self, builder):
        first = builder.build_from_parameters(CAP).mesh
        second = PartBuilder().build_from_parameters(dict(CAP)).mesh
        assert first == second

    def test_module_function_returns_mesh(self):
        mesh = build_from_parameters({"length": 30, "width": 20})
        assert mesh.triangle_count == 12

    def test_every_archetype_rests_on_build_plate(self, builder):
        for params in (PHONE, BRACKET, CAP, {"diameter": 20, "height": 5}, {"diameter": 9},
                       {"length": 5, "width": 5}, {"h": 4}, {}):
            bb = builder.build_from_parameters(params).solid.val().BoundingBox()
            assert bb.zmin == pytest.approx(0, abs=1e-3)

    def test_synonym_priority(self, builder):
        part = builder.build_from_parameters({"diameter": 10, "outer_diameter": 20})
        assert part.archetype is Archetype.SPHERE
        assert part.metadata.dimensions["diameter"] == 20
        assert part.solid.val().BoundingBox().zlen == pytest.approx(20, abs=1e-3)

    def test_outer_diameter_wins_for_cap(self, builder):
        part = builder.build_from_parameters({**CAP, "diameter": 10})
        assert part.archetype is Archetype.CAP
        assert part.metadata.dimensions["outer_diameter"] == 30
        assert part.solid.val().BoundingBox().xlen == pytest.approx(30, abs=1e-3)

    def test_unit_consistency(self, builder):
        part = builder.build_from_parameters({"length": 100, "width": 20, "height": 3})
        assert part.mesh.extents()[0] == pytest.approx(100.0, abs=1e-6)


class TestEnclosure:
    """Tests for the phone case archetype."""

    def test_outer_dimensions(self, builder):
        part = builder.build_from_parameters(PHONE)
        assert part.archetype is Archetype.ENCLOSURE
        x, y, z = part.mesh.extents()
        assert x == pytest.approx(60 + 0.8 + 2 * 2.0, abs=1e-6)
        assert y == pytest.approx(120 + 0.8 + 2 * 2.0, abs=1e-6)
        assert z == pytest.approx(10 + 0.8 + 2.5, abs=1e-6)

    def test_cavity_cut(self, builder):
        part = builder.build_from_parameters(PHONE)
        outer = 64.8 * 124.8 * 13.3
        cavity = 60.8 * 120.8 * 10.8
        assert part.solid.val().Volume() == pytest.approx(outer - cavity, rel=1e-6)
        assert part.metadata.dimensions["hollow"] == 1.0
        assert part.metadata.material == "TPU"

    def test_front_is_open(self, builder):
        part = builder.build_from_parameters(PHONE)
        # Only the rim of the side walls reaches the front plane
        top_facets = [f for f in part.mesh.facets() if all(v[2] > 13.3 - 1e-6 for v in f)]
        area = sum(_area(f) for f in top_facets)
        assert area == pytest.approx(64.8 * 124.8 - 60.8 * 120.8, rel=1e-6)

    def test_preview_skips_cavity(self, preview_builder):
        part = preview_builder.build_from_parameters(PHONE)
        assert part.solid.val().Volume() == pytest.approx(64.8 * 124.8 * 13.3, rel=1e-6)
        assert part.metadata.dimensions["hollow"] == 0.0

    def test_corner_radius(self, builder):
        sharp = builder.build_from_parameters(PHONE).solid.val().Volume()
        rounded = builder.build_from_parameters({**PHONE, "corner_radius": 3}).solid.val().Volume()
        assert rounded < sharp

    def test_oversized_corner_radius_is_dropped(self, builder):
        sharp = builder.build_from_parameters(PHONE)
        part = builder.build_from_parameters({**PHONE, "corner_radius": 40})
        assert part.metadata.dimensions["corner_radius"] == 0.0
        assert part.solid.val().Volume() == pytest.approx(sharp.solid.val().Volume(), rel=1e-6)

    def test_corner_radius_in_metadata(self, builder):
        part = builder.build_from_parameters({**PHONE, "corner_radius": 3})
        assert part.metadata.dimensions["corner_radius"] == 3.0


class TestBracket:
    """Tests for the L-bracket archetype."""

    def test_two_mounting_holes(self, builder):
        part = builder.build_from_parameters(BRACKET)
        assert part.archetype is Archetype.BRACKET
        assert part.metadata.dimensions["hole_count"] == 2
        assert part.metadata.material == "PETG"

    def test_holes_remove_material(self, builder, preview_builder):
        exact = builder.build_from_parameters(BRACKET).solid.val().Volume()
        preview = preview_builder.build_from_parameters(BRACKET).solid.val().Volume()
        hole = math.pi * 2.1 ** 2 * 3.0
        assert preview - exact == pytest.approx(2 * hole, rel=1e-4)

    def test_preview_has_no_holes(self, preview_builder):
        part = preview_builder.build_from_parameters(BRACKET)
        assert part.metadata.dimensions["hole_count"] == 0

    def test_envelope(self, builder):
        x, y, z = builder.build_from_parameters(BRACKET).mesh.extents()
        assert x == pytest.approx(20, abs=1e-6)
        assert y == pytest.approx(40, abs=1e-6)
        assert z == pytest.approx(60, abs=1e-6)

    def test_fillet_adds_material(self, preview_builder):
        plain = preview_builder.build_from_parameters({**BRACKET, "corner_fillet": 0})
        filleted = preview_builder.build_from_parameters(BRACKET)
        fillet_area = 5 ** 2 - math.pi * 5 ** 2 / 4
        added = filleted.solid.val().Volume() - plain.solid.val().Volume()
        assert added == pytest.approx(fillet_area * 20, rel=1e-4)

    def test_short_leg_gets_no_hole(self, builder):
        part = builder.build_from_parameters({"leg1": 40, "leg2": 12})
        assert part.metadata.dimensions["hole_count"] == 1

    def test_leg_as_short_as_thickness(self, builder):
        part = builder.build_from_parameters({"leg_length_1": 3, "leg_length_2": 50})
        assert part.archetype is Archetype.BRACKET
        assert part.mesh.extents() == pytest.approx((20, 3, 50), abs=1e-6)
        assert part.metadata.dimensions["hole_count"] == 1
        expected = 20 * 3 * 50 - math.pi * 2.1 ** 2 * 3
        assert part.solid.val().Volume() == pytest.approx(expected, rel=1e-4)


class TestCap:
    """Tests for the cap archetype."""

    def test_cap_volume(self, builder):
        part = builder.build_from_parameters(CAP)
        assert part.archetype is Archetype.CAP
        outer = math.pi * 15 ** 2 * 12
        cavity = math.pi * 13.5 ** 2 * 10
        assert part.solid.val().Volume() == pytest.approx(outer - cavity, rel=1e-6)

    def test_cap_height_includes_top(self, builder):
        assert builder.build_from_parameters(CAP).mesh.extents()[2] == pytest.approx(12, abs=1e-6)

    def test_preview_cap_is_solid(self, preview_builder):
        part = preview_builder.build_from_parameters(CAP)
        assert part.solid.val().Volume() == pytest.approx(math.pi * 15 ** 2 * 12, rel=1e-6)
        assert part.metadata.notes is not None

    def test_cavity_as_wide_as_cap_leaves_top(self, builder):
        part = builder.build_from_parameters({"outer_diameter": 20, "inner_diameter": 20, "height": 5})
        assert part.archetype is Archetype.CAP
        assert not part.mesh.is_empty
        assert part.solid.val().Volume() == pytest.approx(math.pi * 10 ** 2 * 2, rel=1e-6)
        bb = part.solid.val().BoundingBox()
        assert bb.zmin == pytest.approx(5, abs=1e-3)
        assert bb.zmax == pytest.approx(7, abs=1e-3)
        assert part.metadata.dimensions["wall_thickness"] == 0.0


class TestSimpleArchetypes:
    def test_knob(self, builder):
        part = builder.build_from_parameters({"diameter": 20, "height": 30})
        assert part.archetype is Archetype.KNOB
        assert part.solid.val().Volume() == pytest.approx(math.pi * 100 * 30, rel=1e-6)

    def test_sphere(self, builder):
        part = builder.build_from_parameters({"diameter": 12})
        assert part.archetype is Archetype.SPHERE
        assert part.solid.val().Volume() == pytest.approx(4 / 3 * math.pi * 6 ** 3, rel=1e-6)

    def test_block_default_height(self, builder):
        part = builder.build_from_parameters({"length": 30, "width": 20})
        assert part.archetype is Archetype.BLOCK
        assert part.mesh.extents() == pytest.approx((30, 20, 2))

    def test_fallback_cylinder(self, builder):
        part = builder.build_from_parameters({"h": 10})
        assert part.archetype is Archetype.FALLBACK_CYLINDER
        assert part.metadata.dimensions["diameter"] == 15

    def test_default_shim(self, builder):
        part = builder.build_from_parameters({})
        assert part.archetype is Archetype.DEFAULT_SHIM
        assert part.mesh.extents() == pytest.approx((30, 30, 2))

    def test_face_plate_holes(self, builder):
        part = builder.build_from_parameters({
            "length": 70, "width": 115, "thickness": 3,
            "holes": [{"diameter": 4, "offset_b": 41.5}, {"diameter": 4, "offset_b": -41.5}],
        })
        assert part.archetype is Archetype.FACE_PLATE
        expected = 70 * 115 * 3 - 2 * math.pi * 4 * 3
        assert part.solid.val().Volume() == pytest.approx(expected, rel=1e-6)


class TestBuildPart:
    """Tests for catalogued part types."""

    def test_shim(self, builder):
        part = builder.build_part("shim", {"length": 20, "width": 10, "thickness": 1})
        assert part.mesh.extents() == pytest.approx((20, 10, 1))

    def test_washer(self, builder):
        part = builder.build_part("washer", {"outer_d": 20, "inner_d": 8, "thickness": 2})
        assert part.archetype is Archetype.WASHER
        expected = math.pi * (10 ** 2 - 4 ** 2) * 2
        assert part.solid.val().Volume() == pytest.approx(expected, rel=1e-6)

    def test_l_bracket(self, builder):
        part = builder.build_part("l_bracket", {"leg_a": 40, "leg_b": 60, "thickness": 3})
        assert part.archetype is Archetype.BRACKET
        assert part.metadata.dimensions["hole_count"] == 2

    def test_u_clamp(self, builder):
        part = builder.build_part(
            "u_clamp", {"width": 30, "height": 20, "depth": 10, "thickness": 3}
        )
        assert part.mesh.extents() == pytest.approx((30, 10, 20))
        assert part.solid.val().Volume() == pytest.approx((30 * 20 - 24 * 17) * 10, rel=1e-6)

    def test_clip_gap(self, builder):
        part = builder.build_part("clip", {"outer_d": 20, "inner_d": 16, "thickness": 3})
        ring = math.pi * (10 ** 2 - 8 ** 2) * 3
        assert part.solid.val().Volume() == pytest.approx(ring * 300 / 360, rel=1e-4)

    def test_face_plate(self, builder):
        part = builder.build_part("face_plate", {
            "length": 50, "width": 30, "thickness": 2, "holes": [{"diameter": 5}],
        })
        expected = 50 * 30 * 2 - math.pi * 2.5 ** 2 * 2
        assert part.solid.val().Volume() == pytest.approx(expected, rel=1e-6)

    def test_unknown(self, builder):
        with pytest.raises(UnknownPartTypeError):
            builder.build_part("hinge", {})

    def test_missing(self, builder):
        with pytest.raises(MissingParameterError):
            builder.build_part("u_clamp", {"width": 30})


class TestBuildRequest:
    """Tests for building from a PartRequest."""

    def test_parameters(self, builder):
        part = builder.build_request(PartRequest(parameters=CAP))
        assert part.archetype is Archetype.CAP

    def test_part_type(self, builder):
        request = PartRequest(
            part_type="washer", parameters={"outer_d": 20, "inner_d": 8, "thickness": 2}
        )
        assert builder.build_request(request).archetype is Archetype.WASHER

    def test_recipe(self, builder):
        request = PartRequest.model_validate({
            "name": "knob",
            "recipe": {"steps": [{"shape": "cylinder", "params": {"diameter": 20, "height": 30}}]},
        })
        part = builder.build_request(request)
        assert part.archetype is Archetype.RECIPE
        assert part.metadata.dimensions["size_z"] == pytest.approx(30, abs=1e-6)

    def test_measurements_fill_parameters(self, builder):
        request = PartRequest(measurements=[
            Measurement(distance_mm=42.5),
            Measurement(distance_mm=18.0),
            Measurement(distance_mm=1.6),
        ])
        part = builder.build_request(request)
        assert part.archetype is Archetype.BLOCK
        assert part.mesh.extents() == pytest.approx((42.5, 18.0, 1.6))

    def test_explicit_parameters_override_measurements(self, builder):
        request = PartRequest(
            parameters={"width": 10},
            measurements=[Measurement(distance_mm=42.5), Measurement(distance_mm=18.0)],
        )
        part = builder.build_request(request)
        assert part.mesh.extents()[1] == pytest.approx(10)

    def test_part_type_with_recipe_rejected(self):
        with pytest.raises(ValueError, match="part_type"):
            PartRequest.model_validate({
                "part_type": "shim",
                "recipe": {"steps": [{"shape": "sphere", "params": {"diameter": 2}}]},
            })


def _area(facet):
    (x1, y1, z1), (x2, y2, z2), (x3, y3, z3) = facet
    ux, uy, uz = x2 - x1, y2 - y1, z2 - z1
    vx, vy, vz = x3 - x1, y3 - y1, z3 - z1
    cx = uy * vz - uz * vy
    cy = uz * vx - ux * vz
    cz = ux * vy - uy * vx
    return math.sqrt(cx * cx + cy * cy + cz * cz) / 2
