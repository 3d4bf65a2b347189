import uuid

from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('donations', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='PaymentDetail',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated at')),
                ('provider', models.CharField(choices=[('STRIPE', 'Stripe'), ('DIRECT', 'Direct'), ('MANUAL', 'Manual')], default='MANUAL', max_length=20, verbose_name='Provider')),
                ('payment_method_id', models.CharField(blank=True, max_length=100, verbose_name='Payment method ID')),
                ('receipt_url', models.URLField(blank=True, max_length=500, verbose_name='Receipt URL')),
                ('metadata', models.JSONField(blank=True, default=dict, verbose_name='Metadata')),
                ('donation', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='payment_detail', to='donations.donation', verbose_name='Donation')),
            ],
            options={
                'verbose_name': 'Payment detail',
                'verbose_name_plural': 'Payment details',
                'ordering': ['-created_at'],
            },
        ),
    ]
