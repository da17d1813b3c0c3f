"""
Floor Plan Analysis Pipeline
=============================
File-based entry point for room detection.
Loads an image, detects rooms for a target canvas and optionally saves a
debug overlay.
"""

import os
import json
import logging
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field

from .preprocessing import load_image
from .floor_plan_analyzer import AnalyzerConfig, FloorPlanAnalyzer, RoomRect
from .visualization import rooms_to_image, save_visualization

logger = logging.getLogger(__name__)


@dataclass
class AnalysisResult:
    """Results from floor plan analysis."""
    success: bool
    rooms: List[RoomRect] = field(default_factory=list)
    canvas_width: float = 0.0
    canvas_height: float = 0.0
    visualization_path: Optional[str] = None
    error: Optional[str] = None

    @property
    def room_count(self) -> int:
        return len(self.rooms)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'success': self.success,
            'room_count': self.room_count,
            'canvas_width': self.canvas_width,
            'canvas_height': self.canvas_height,
            'visualization_path': self.visualization_path,
            'error': self.error,
            'rooms': [r.to_dict() for r in self.rooms],
        }


class FloorPlanPipeline:
    """
    Load, analyze and visualize a floor plan image file.
    """

    def __init__(self, config: Optional[AnalyzerConfig] = None):
        self.analyzer = FloorPlanAnalyzer(config)

    def run(
        self,
        image_path: str,
        canvas_width: float,
        canvas_height: float,
        output_dir: Optional[str] = None
    ) -> AnalysisResult:
        """
        Analyze a floor plan image file.

        Args:
            image_path: Path to floor plan image
            canvas_width: Width of the target canvas
            canvas_height: Height of the target canvas
            output_dir: Directory for the overlay image (skipped when None)

        Returns:
            AnalysisResult; failures are reported in result.error
        """
        try:
            logger.info(f"Analyzing floor plan: {image_path}")
            image = load_image(image_path)
            rooms = self.analyzer.analyze(image, canvas_width, canvas_height)

            vis_path = None
            if output_dir:
                os.makedirs(output_dir, exist_ok=True)
                base_name = os.path.splitext(os.path.basename(image_path))[0]
                vis_path = os.path.join(output_dir, f"{base_name}_rooms.png")
                overlay = rooms_to_image(image, rooms, canvas_width, canvas_height)
                save_visualization(vis_path, overlay)
                logger.info(f"Saved visualization to: {vis_path}")

            return AnalysisResult(
                success=True,
                rooms=rooms,
                canvas_width=canvas_width,
                canvas_height=canvas_height,
                visualization_path=vis_path
            )

        except ValueError as e:
            logger.error(f"Analysis failed: {e}")
            return AnalysisResult(
                success=False,
                canvas_width=canvas_width,
                canvas_height=canvas_height,
                error=str(e)
            )


def analyze_floorplan_file(
    image_path: str,
    canvas_width: float,
    canvas_height: float,
    output_dir: Optional[str] = None,
    **kwargs
) -> Dict[str, Any]:
    """
    Convenience function for file-based analysis.

    Args:
        **kwargs: AnalyzerConfig fields

    Returns:
        Dictionary with analysis results
    """
    pipeline = FloorPlanPipeline(AnalyzerConfig(**kwargs))
    result = pipeline.run(image_path, canvas_width, canvas_height, output_dir=output_dir)
    return result.to_dict()


def main(argv=None) -> int:
    import argparse

    defaults = AnalyzerConfig()
    parser = argparse.ArgumentParser(description="Detect rooms in a floor plan image")
    parser.add_argument("--input", "-i", required=True, help="Input image path")
    parser.add_argument("--output", "-o", help="Directory for the overlay image")
    parser.add_argument("--width", type=float, default=280, help="Target canvas width")
    parser.add_argument("--height", type=float, default=280, help="Target canvas height")
    parser.add_argument("--max-size", type=int, default=defaults.max_size, help="Longest working side (px)")
    parser.add_argument("--threshold", type=float, default=defaults.wall_threshold, help="Open-floor luma threshold")
    parser.add_argument("--dilate", type=int, default=defaults.dilate_radius, help="Wall dilation radius (px)")
    parser.add_argument("--min-area", type=float, default=defaults.min_area_ratio, help="Minimum room area ratio")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    result = analyze_floorplan_file(
        args.input,
        args.width,
        args.height,
        output_dir=args.output,
        max_size=args.max_size,
        wall_threshold=args.threshold,
        dilate_radius=args.dilate,
        min_area_ratio=args.min_area
    )

    print(json.dumps(result, indent=2))
    return 0 if result['success'] else 1


# Command-line interface
if __name__ == "__main__":
    raise SystemExit(main())
