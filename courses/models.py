from django.db import models
from django.db.models import CASCADE, UniqueConstraint

from courses.managers import CourseManager, HoleManager

HOLE_COUNT_CHOICES = (
    (9, "9 Holes"),
    (18, "18 Holes"),
)


class Course(models.Model):
    name = models.CharField(max_length=100, unique=True)
    address = models.CharField(verbose_name="Address", max_length=200, blank=True, null=True)
    phone = models.CharField(verbose_name="Phone", max_length=20, blank=True, null=True)
    number_of_holes = models.IntegerField(choices=HOLE_COUNT_CHOICES, default=18)
    created_at = models.DateTimeField(verbose_name="Created", auto_now_add=True)

    objects = CourseManager()

    class Meta:
        ordering = ("name", )

    def __str__(self):
        return self.name


class Hole(models.Model):
    course = models.ForeignKey(Course, related_name='holes', on_delete=CASCADE)
    hole_number = models.IntegerField(default=0)
    mens_distance = models.IntegerField(verbose_name="Men's distance", blank=True, null=True)
    mens_par = models.IntegerField(verbose_name="Men's par", default=4)
    mens_handicap = models.IntegerField(verbose_name="Men's handicap", blank=True, null=True)
    ladies_distance = models.IntegerField(verbose_name="Ladies' distance", blank=True, null=True)
    ladies_par = models.IntegerField(verbose_name="Ladies' par", default=4)
    ladies_handicap = models.IntegerField(verbose_name="Ladies' handicap", blank=True, null=True)

    objects = HoleManager()

    class Meta:
        ordering = ("course", "hole_number", )
        constraints = [
            UniqueConstraint(fields=["course", "hole_number"], name="unique_course_holenumber")
        ]

    def par_for(self, sex):
        return self.ladies_par if sex == "F" else self.mens_par

    def __str__(self):
        return "{} Hole {}".format(self.course.name, self.hole_number)
