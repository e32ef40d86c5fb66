from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('register', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='QuotaLedger',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('kind', models.CharField(choices=[('season', 'Season Quota'), ('skins', 'Skins Quota')], max_length=10, verbose_name='Ledger')),
                ('slots', models.JSONField(default=list, verbose_name='Results (most recent first)')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated')),
                ('player', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='quota_ledgers', to='register.player', verbose_name='Player')),
            ],
            options={
                'verbose_name': 'Quota Ledger',
                'verbose_name_plural': 'Quota Ledgers',
            },
        ),
        migrations.AddConstraint(
            model_name='quotaledger',
            constraint=models.UniqueConstraint(fields=('player', 'kind'), name='unique_player_ledger'),
        ),
    ]
