from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Player',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100, verbose_name='Name')),
                ('email', models.CharField(max_length=200, unique=True, verbose_name='Email')),
                ('phone', models.CharField(blank=True, max_length=20, null=True, verbose_name='Phone number')),
                ('sex', models.CharField(choices=[('M', 'Male'), ('F', 'Female')], default='M', max_length=1, verbose_name='Sex')),
                ('quota', models.IntegerField(default=0, verbose_name='Quota')),
                ('active', models.BooleanField(default=True, verbose_name='Active')),
                ('role', models.CharField(choices=[('player', 'Player'), ('admin', 'Admin')], default='player', max_length=10, verbose_name='Role')),
                ('fedex_points', models.IntegerField(default=0, verbose_name='FedEx points')),
                ('tournaments_played', models.IntegerField(default=0, verbose_name='Tournaments played')),
                ('prize_money', models.DecimalField(decimal_places=2, default=0, max_digits=8, verbose_name='Prize money')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created')),
            ],
            options={
                'ordering': ('name',),
            },
        ),
    ]
