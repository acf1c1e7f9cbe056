import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('campaigns', '0001_initial'),
        ('creatives', '0001_initial'),
    ]

    operations = [
        migrations.AddField(
            model_name='campaign',
            name='creative',
            field=models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to='creatives.creative'),
        ),
    ]
