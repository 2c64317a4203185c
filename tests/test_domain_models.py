"""Tests for domain models to verify they work correctly."""

import pytest

from plotpath.domain import (
    CoveringShape,
    CubicSegment,
    DrawCommand,
    FillRule,
    LineSegment,
    Path,
    Point,
    build_path,
)
from plotpath.exceptions import PathDataError

M, L, C, Z = DrawCommand.MOVE, DrawCommand.LINE, DrawCommand.CURVE, DrawCommand.CLOSE


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        p = Point(100.0, 200.0)
        assert p.to_tuple() == (100.0, 200.0)
        assert Point.from_tuple((1, 2)) == Point(1.0, 2.0)

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = Point(100.0, 200.0)
        p2 = Point.from_dict(p1.to_dict())
        assert p2 == p1

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore


class TestLineSegment:
    """Tests for LineSegment class."""

    def test_endpoints(self) -> None:
        """Test start and end follow the parametrisation."""
        seg = LineSegment(Point(0, 0), Point(10, 4))
        assert seg.start == Point(0, 0)
        assert seg.end == Point(10, 4)
        assert seg.point_at(0.0) == seg.start
        assert seg.point_at(1.0) == seg.end

    def test_point_at_midpoint(self) -> None:
        """Test evaluation halfway along the line."""
        seg = LineSegment(Point(0, 0), Point(10, 4))
        assert seg.point_at(0.5) == Point(5.0, 2.0)

    def test_subsegment(self) -> None:
        """Test extracting the middle of a line."""
        seg = LineSegment(Point(0, 0), Point(8, 0))
        sub = seg.subsegment(0.25, 0.75)
        assert sub == LineSegment(Point(2.0, 0.0), Point(6.0, 0.0))

    def test_bounding_box(self) -> None:
        """Test bounding box ignores direction."""
        seg = LineSegment(Point(10, 0), Point(0, 5))
        assert seg.bounding_box() == (0, 0, 10, 5)


class TestCubicSegment:
    """Tests for CubicSegment class."""

    @pytest.fixture
    def arch(self) -> CubicSegment:
        """An arch from (0, 0) to (10, 0) peaking at y=7.5."""
        return CubicSegment(Point(0, 0), Point(0, 10), Point(10, 10), Point(10, 0))

    def test_endpoints(self, arch: CubicSegment) -> None:
        """Test endpoints of the curve."""
        assert arch.start == Point(0, 0)
        assert arch.end == Point(10, 0)
        assert arch.point_at(0.0) == arch.start
        assert arch.point_at(1.0) == arch.end

    def test_point_at_midpoint(self, arch: CubicSegment) -> None:
        """Test evaluation at the top of the arch."""
        mid = arch.point_at(0.5)
        assert mid.x == pytest.approx(5.0)
        assert mid.y == pytest.approx(7.5)

    def test_subsegment_matches_curve(self, arch: CubicSegment) -> None:
        """Test a sub-curve traces the same points as the original."""
        sub = arch.subsegment(0.25, 0.75)
        assert sub.start.x == pytest.approx(arch.point_at(0.25).x)
        assert sub.start.y == pytest.approx(arch.point_at(0.25).y)
        assert sub.end.x == pytest.approx(arch.point_at(0.75).x)
        assert sub.point_at(0.5).y == pytest.approx(arch.point_at(0.5).y)

    def test_subsegment_at_bounds(self, arch: CubicSegment) -> None:
        """Test sub-curves touching the ends of the parameter range."""
        head = arch.subsegment(0.0, 0.5)
        tail = arch.subsegment(0.5, 1.0)
        assert head.start.x == pytest.approx(0.0)
        assert tail.end.x == pytest.approx(10.0)
        assert tail.end.y == pytest.approx(0.0, abs=1e-9)
        assert head.end.x == pytest.approx(tail.start.x)

    def test_bounding_box_is_tight(self, arch: CubicSegment) -> None:
        """Test the box hugs the curve rather than its control points."""
        min_x, min_y, max_x, max_y = arch.bounding_box()
        assert (min_x, min_y, max_x) == (0, 0, 10)
        assert max_y == pytest.approx(7.5)


class TestBuildPath:
    """Tests for build_path."""

    def test_closed_square(self) -> None:
        """Test a closed square yields four segments and can cover."""
        path = build_path(
            [M, L, L, L, Z],
            [0, 0, 10, 0, 10, 10, 0, 10],
            source_id=3,
            has_fill=True,
        )
        assert len(path.segments) == 4
        assert path.segments[-1] == LineSegment(Point(0, 10), Point(0, 0))
        assert path.closed
        assert path.can_cover
        assert path.source_id == 3

    def test_close_at_start_is_dropped(self) -> None:
        """Test a close whose current point is the start emits nothing."""
        path = build_path([M, L, L, Z], [0, 0, 10, 0, 0, 0], source_id=0, has_fill=True)
        assert len(path.segments) == 2
        assert path.closed

    def test_open_filled_path_cannot_cover(self) -> None:
        """Test that fill alone is not enough to cover."""
        path = build_path([M, L, L], [0, 0, 10, 0, 10, 10], source_id=0, has_fill=True)
        assert not path.closed
        assert not path.can_cover

    def test_closed_unfilled_path_cannot_cover(self) -> None:
        """Test that closing alone is not enough to cover."""
        path = build_path([M, L, L, Z], [0, 0, 10, 0, 10, 10], source_id=0)
        assert path.closed
        assert not path.can_cover

    def test_curve(self) -> None:
        """Test a curve command becomes a cubic segment."""
        path = build_path([M, C], [0, 0, 0, 10, 10, 10, 10, 0], source_id=0)
        assert path.segments == (
            CubicSegment(Point(0, 0), Point(0, 10), Point(10, 10), Point(10, 0)),
        )

    def test_fill_rule_kept(self) -> None:
        """Test fill rule is carried onto the path."""
        path = build_path([M, L], [0, 0, 1, 1], source_id=0, fill_rule=FillRule.EVEN_ODD)
        assert path.fill_rule is FillRule.EVEN_ODD

    def test_coordinate_mismatch(self) -> None:
        """Test mismatched streams raise PathDataError."""
        with pytest.raises(PathDataError, match="need 4 coordinates, got 3"):
            build_path([M, L], [0, 0, 1], source_id=0)

    def test_draw_before_move(self) -> None:
        """Test drawing without a current point raises PathDataError."""
        with pytest.raises(PathDataError, match="LINE before MOVE"):
            build_path([L], [0, 0], source_id=0)

    def test_empty(self) -> None:
        """Test an empty command stream gives an empty path."""
        path = build_path([], [], source_id=0)
        assert path.is_empty()
        assert not path.closed


class TestPath:
    """Tests for Path class."""

    @pytest.fixture
    def two_contours(self) -> Path:
        """Two separate strokes in one path."""
        return build_path([M, L, L, M, L], [0, 0, 5, 0, 5, 5, 20, 20, 30, 20], source_id=1)

    def test_contours(self, two_contours: Path) -> None:
        """Test a move starts a new contour."""
        contours = two_contours.contours()
        assert [len(c) for c in contours] == [2, 1]
        assert contours[1][0].start == Point(20, 20)

    def test_bounding_box(self, two_contours: Path) -> None:
        """Test the box spans every contour."""
        assert two_contours.bounding_box() == (0, 0, 30, 20)

    def test_representative_point(self, two_contours: Path) -> None:
        """Test the representative point is the first segment's midpoint."""
        assert two_contours.representative_point() == Point(2.5, 0.0)

    def test_representative_point_empty(self) -> None:
        """Test empty paths have no representative point."""
        with pytest.raises(ValueError):
            Path(segments=(), source_id=0).representative_point()

    def test_with_segments_keeps_metadata(self) -> None:
        """Test fragments keep source metadata."""
        path = build_path(
            [M, L, L, Z], [0, 0, 10, 0, 10, 10], source_id=7, has_fill=True,
            fill_rule=FillRule.EVEN_ODD,
        )
        fragment = path.with_segments(path.segments[:1])
        assert fragment.source_id == 7
        assert fragment.has_fill
        assert fragment.fill_rule is FillRule.EVEN_ODD
        assert not fragment.closed
        assert len(path.segments) == 3

    def test_structural_equality(self) -> None:
        """Test equal segment lists make equal paths."""
        a = build_path([M, L], [0, 0, 1, 1], source_id=0)
        b = build_path([M, L], [0, 0, 1, 1], source_id=0)
        assert a == b


class TestCoveringShape:
    """Tests for CoveringShape class."""

    def test_from_path(self) -> None:
        """Test a closed filled path converts to a covering shape."""
        path = build_path(
            [M, L, L, L, Z], [0, 0, 10, 0, 10, 10, 0, 10], source_id=2, has_fill=True
        )
        shape = CoveringShape.from_path(path)
        assert shape.source_id == 2
        assert len(shape.contours) == 1
        assert shape.bbox == (0, 0, 10, 10)

    def test_open_contours_are_closed(self) -> None:
        """Test every contour gains its implicit closing edge."""
        path = build_path(
            [M, L, L, M, L, L, Z],
            [0, 0, 10, 0, 10, 10, 20, 0, 30, 0, 30, 10],
            source_id=0,
            has_fill=True,
        )
        shape = CoveringShape.from_path(path)
        first = shape.contours[0]
        assert len(first) == 3
        assert first[-1] == LineSegment(Point(10, 10), Point(0, 0))
        assert len(shape.contours[1]) == 3

    def test_rejects_non_covering_path(self) -> None:
        """Test unfilled paths cannot become covering shapes."""
        path = build_path([M, L, L, Z], [0, 0, 10, 0, 10, 10], source_id=0)
        with pytest.raises(ValueError, match="not a closed filled shape"):
            CoveringShape.from_path(path)
