import uuid

from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Masjid',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated at')),
                ('name', models.CharField(max_length=200, verbose_name='Name')),
                ('description', models.TextField(blank=True, verbose_name='Description')),
                ('address', models.CharField(max_length=255, verbose_name='Address')),
                ('city', models.CharField(max_length=100, verbose_name='City')),
                ('state', models.CharField(max_length=100, verbose_name='State')),
                ('country', models.CharField(max_length=100, verbose_name='Country')),
                ('zip_code', models.CharField(max_length=20, verbose_name='Zip code')),
                ('email', models.EmailField(blank=True, max_length=254, verbose_name='Email')),
                ('phone', models.CharField(blank=True, max_length=20, verbose_name='Phone')),
                ('website', models.URLField(blank=True, verbose_name='Website')),
                ('logo_url', models.URLField(blank=True, verbose_name='Logo URL')),
                ('cover_image_url', models.URLField(blank=True, verbose_name='Cover image URL')),
                ('is_verified', models.BooleanField(default=False, verbose_name='Verified')),
            ],
            options={
                'verbose_name': 'Masjid',
                'verbose_name_plural': 'Masjids',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='MasjidAdmin',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated at')),
                ('role', models.CharField(choices=[('ADMIN', 'Admin'), ('MANAGER', 'Manager')], default='ADMIN', max_length=20, verbose_name='Role')),
                ('masjid', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='admins', to='masjids.masjid', verbose_name='Masjid')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='masjid_admin_roles', to=settings.AUTH_USER_MODEL, verbose_name='User')),
            ],
            options={
                'verbose_name': 'Masjid admin',
                'verbose_name_plural': 'Masjid admins',
                'ordering': ['created_at'],
                'unique_together': {('user', 'masjid')},
            },
        ),
    ]
