from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('courses', '0001_initial'),
        ('register', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Tournament',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('date', models.DateField(verbose_name='Date')),
                ('number_of_holes', models.IntegerField(choices=[(9, '9 Holes'), (18, '18 Holes')], default=18, verbose_name='Number of holes')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created')),
                ('course', models.ForeignKey(on_delete=django.db.models.deletion.DO_NOTHING, related_name='tournaments', to='courses.course', verbose_name='Course')),
            ],
            options={
                'ordering': ('date',),
            },
        ),
        migrations.CreateModel(
            name='TournamentPlayer',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('registration_date', models.DateTimeField(auto_now_add=True, verbose_name='Registered')),
                ('paid', models.BooleanField(default=False, verbose_name='Paid')),
                ('player', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to='register.player', verbose_name='Player')),
                ('tournament', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='roster', to='events.tournament', verbose_name='Tournament')),
            ],
            options={
                'verbose_name': 'Tournament Player',
                'verbose_name_plural': 'Tournament Players',
            },
        ),
        migrations.AddField(
            model_name='tournament',
            name='players',
            field=models.ManyToManyField(blank=True, related_name='tournaments', through='events.TournamentPlayer', to='register.player'),
        ),
        migrations.AddConstraint(
            model_name='tournamentplayer',
            constraint=models.UniqueConstraint(fields=('tournament', 'player'), name='unique_tournament_player'),
        ),
    ]
