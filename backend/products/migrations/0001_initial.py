# Generated manually for the initial schema

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('tenant', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Category',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(help_text='Name of the product category.', max_length=100)),
                ('description', models.TextField(blank=True, help_text='Description of the category.')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('tenant', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='categories', to='tenant.tenant')),
            ],
            options={
                'verbose_name': 'Category',
                'verbose_name_plural': 'Categories',
                'ordering': ['name'],
                'constraints': [models.UniqueConstraint(fields=('tenant', 'name'), name='unique_category_name_per_tenant')],
            },
        ),
        migrations.CreateModel(
            name='Tax',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(help_text="Name of the tax, e.g., 'VAT' or 'Service Charge'.", max_length=50)),
                ('rate', models.DecimalField(decimal_places=2, help_text='Percentage (e.g. 7 for 7%), or a currency amount when the tax is fixed.', max_digits=10, validators=[django.core.validators.MinValueValidator(0)])),
                ('is_fixed', models.BooleanField(default=False, help_text='Whether the rate is an absolute amount rather than a percentage.')),
                ('is_inclusive', models.BooleanField(default=False, help_text='Whether the tax is already included in product prices.')),
                ('description', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('tenant', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='taxes', to='tenant.tenant')),
            ],
            options={
                'verbose_name': 'Tax',
                'verbose_name_plural': 'Taxes',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Product',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(help_text='Name of the product.', max_length=200)),
                ('unit', models.CharField(choices=[('PIECE', 'Piece'), ('CUP', 'Cup'), ('PLATE', 'Plate'), ('BOWL', 'Bowl'), ('GLASS', 'Glass'), ('BOTTLE', 'Bottle')], default='PIECE', max_length=10)),
                ('price', models.DecimalField(decimal_places=2, help_text='The selling price of the product.', max_digits=10, validators=[django.core.validators.MinValueValidator(0)])),
                ('track_stock', models.BooleanField(default=False, help_text='Whether stock levels are tracked for this product.')),
                ('stock', models.PositiveIntegerField(default=0)),
                ('product_type', models.CharField(choices=[('STANDALONE', 'Standalone'), ('BUNDLE', 'Bundle'), ('BUNDLE_ITEM', 'Bundle Item')], default='STANDALONE', max_length=12)),
                ('description', models.TextField(blank=True, help_text='Detailed description of the product.')),
                ('image_link', models.URLField(blank=True, max_length=500)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('category', models.ForeignKey(help_text='Product category.', on_delete=django.db.models.deletion.PROTECT, related_name='products', to='products.category')),
                ('tenant', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='products', to='tenant.tenant')),
            ],
            options={
                'verbose_name': 'Product',
                'verbose_name_plural': 'Products',
                'ordering': ['name'],
                'indexes': [
                    models.Index(fields=['tenant', 'category'], name='product_tenant_category_idx'),
                    models.Index(fields=['tenant', 'product_type'], name='product_tenant_type_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='BundleItem',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('quantity', models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)])),
                ('bundle', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='bundle_items', to='products.product')),
                ('product', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='included_in_bundles', to='products.product')),
                ('tenant', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='bundle_items', to='tenant.tenant')),
            ],
            options={
                'constraints': [models.UniqueConstraint(fields=('bundle', 'product'), name='unique_component_per_bundle')],
            },
        ),
    ]
