from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Course',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100, unique=True)),
                ('address', models.CharField(blank=True, max_length=200, null=True, verbose_name='Address')),
                ('phone', models.CharField(blank=True, max_length=20, null=True, verbose_name='Phone')),
                ('number_of_holes', models.IntegerField(choices=[(9, '9 Holes'), (18, '18 Holes')], default=18)),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created')),
            ],
            options={
                'ordering': ('name',),
            },
        ),
        migrations.CreateModel(
            name='Hole',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('hole_number', models.IntegerField(default=0)),
                ('mens_distance', models.IntegerField(blank=True, null=True, verbose_name="Men's distance")),
                ('mens_par', models.IntegerField(default=4, verbose_name="Men's par")),
                ('mens_handicap', models.IntegerField(blank=True, null=True, verbose_name="Men's handicap")),
                ('ladies_distance', models.IntegerField(blank=True, null=True, verbose_name="Ladies' distance")),
                ('ladies_par', models.IntegerField(default=4, verbose_name="Ladies' par")),
                ('ladies_handicap', models.IntegerField(blank=True, null=True, verbose_name="Ladies' handicap")),
                ('course', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='holes', to='courses.course')),
            ],
            options={
                'ordering': ('course', 'hole_number'),
            },
        ),
        migrations.AddConstraint(
            model_name='hole',
            constraint=models.UniqueConstraint(fields=('course', 'hole_number'), name='unique_course_holenumber'),
        ),
    ]
