from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('courses', '0001_initial'),
        ('events', '0001_initial'),
        ('register', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Score',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('score', models.IntegerField(verbose_name='Strokes')),
                ('quota', models.IntegerField(default=0, verbose_name='Quota points')),
                ('foursome_group', models.CharField(blank=True, max_length=20, null=True, verbose_name='Foursome')),
                ('entered_at', models.DateTimeField(auto_now=True, verbose_name='Entered')),
                ('hole', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to='courses.hole', verbose_name='Hole')),
                ('player', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='scores', to='register.player', verbose_name='Player')),
                ('tournament', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='scores', to='events.tournament', verbose_name='Tournament')),
            ],
            options={
                'verbose_name': 'Score',
                'verbose_name_plural': 'Scores',
            },
        ),
        migrations.AddConstraint(
            model_name='score',
            constraint=models.UniqueConstraint(fields=('tournament', 'player', 'hole'), name='unique_tournament_player_hole'),
        ),
    ]
