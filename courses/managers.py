import structlog

from django.db import models, transaction

logger = structlog.get_logger(__name__)

HOLE_FIELDS = ("mens_distance", "mens_par", "mens_handicap", "ladies_distance", "ladies_par", "ladies_handicap", )


class CourseManager(models.Manager):

    def get_queryset(self):
        return super().get_queryset().prefetch_related("holes")


class HoleManager(models.Manager):

    @transaction.atomic()
    def upsert_holes(self, course, holes):
        """
        Create or update a course's holes, keyed by hole number.

        Parameters:
            course (Course): The course that owns the holes.
            holes (iterable[dict]): Hole descriptors with a "hole_number" key and any of the
                men's/ladies' distance, par and handicap fields.

        Returns:
            list[Hole]: Every hole on the course, ordered by hole number.
        """
        for hole in holes:
            defaults = {field: hole[field] for field in HOLE_FIELDS if field in hole}
            self.update_or_create(course=course, hole_number=hole["hole_number"], defaults=defaults)

        logger.info("Course holes saved", course=course.name, holes=len(holes))
        return list(self.filter(course=course).order_by("hole_number"))
