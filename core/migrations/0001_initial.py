from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='LeagueSettings',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('tournament_fee_18_holes', models.DecimalField(decimal_places=2, default=0, max_digits=6, verbose_name='18 hole tournament fee')),
                ('tournament_fee_9_holes', models.DecimalField(decimal_places=2, default=0, max_digits=6, verbose_name='9 hole tournament fee')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated')),
            ],
            options={
                'verbose_name': 'League Settings',
                'verbose_name_plural': 'League Settings',
            },
        ),
    ]
