from django.contrib import admin
from courses.models import Course, Hole


class HoleInline(admin.TabularInline):
    model = Hole
    can_delete = True
    extra = 0
    fields = ["hole_number", "mens_distance", "mens_par", "mens_handicap",
              "ladies_distance", "ladies_par", "ladies_handicap", ]


class CourseAdmin(admin.ModelAdmin):
    fields = ["name", "address", "phone", "number_of_holes", ]
    list_display = ["name", "number_of_holes", "address", ]
    save_on_top = True
    inlines = [HoleInline, ]


admin.site.register(Course, CourseAdmin)
