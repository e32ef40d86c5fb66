from django.db import models

from .managers import PlayerManager

SEX_CHOICES = (
    ("M", "Male"),
    ("F", "Female"),
)
ROLE_CHOICES = (
    ("player", "Player"),
    ("admin", "Admin"),
)


class Player(models.Model):
    name = models.CharField(verbose_name="Name", max_length=100)
    email = models.CharField(verbose_name="Email", unique=True, max_length=200)
    phone = models.CharField(verbose_name="Phone number", max_length=20, blank=True, null=True)
    sex = models.CharField(verbose_name="Sex", choices=SEX_CHOICES, max_length=1, default="M")
    quota = models.IntegerField(verbose_name="Quota", default=0)
    active = models.BooleanField(verbose_name="Active", default=True)
    role = models.CharField(verbose_name="Role", choices=ROLE_CHOICES, max_length=10, default="player")
    fedex_points = models.IntegerField(verbose_name="FedEx points", default=0)
    tournaments_played = models.IntegerField(verbose_name="Tournaments played", default=0)
    prize_money = models.DecimalField(verbose_name="Prize money", max_digits=8, decimal_places=2, default=0)
    created_at = models.DateTimeField(verbose_name="Created", auto_now_add=True)

    objects = PlayerManager()

    class Meta:
        ordering = ("name", )

    def __str__(self):
        return self.name
