from django.db import models


class Creative(models.Model):
    class Meta:
        app_label = 'creatives'
        ordering = ['-created_at', '-id']

    campaign = models.ForeignKey('campaigns.Campaign', on_delete=models.CASCADE, related_name='creatives')
    advertiser = models.ForeignKey('authentication.UserProfile', on_delete=models.CASCADE, related_name='creatives')
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    public_url = models.URLField(max_length=500)
    file_type = models.CharField(max_length=100, blank=True)  # image/png, video/mp4...
    storage_path = models.CharField(max_length=300)
    duration_seconds = models.PositiveIntegerField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    @property
    def is_video(self):
        return self.file_type.startswith('video/')

    def __str__(self):
        return self.title
