from rest_framework import serializers
from .models import User, UserProfile


class UserProfileSerializer(serializers.ModelSerializer):
    user_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = UserProfile
        fields = (
            'id', 'user_id', 'role', 'business_name', 'contact_email', 'phone',
            'website', 'description', 'is_verified', 'created_at', 'updated_at',
        )
        read_only_fields = ('id', 'user_id', 'is_verified', 'created_at', 'updated_at')

    def validate_role(self, value):
        current = self.instance.role if self.instance else None
        if value == UserProfile.ROLE_ADMIN and current != UserProfile.ROLE_ADMIN:
            raise serializers.ValidationError('The admin role cannot be self-assigned.')
        return value


class UserSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ('id', 'email', 'username', 'signup_metadata')
        read_only_fields = fields


class RegisterSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, min_length=8)
    username = serializers.CharField(required=False, max_length=150)
    role = serializers.ChoiceField(
        choices=[UserProfile.ROLE_ADVERTISER, UserProfile.ROLE_SCREEN_OWNER],
        default=UserProfile.ROLE_ADVERTISER,
    )
    business_name = serializers.CharField(required=False, allow_blank=True, max_length=200)

    def validate_email(self, value):
        if User.objects.filter(email__iexact=value).exists():
            raise serializers.ValidationError('A user with this email already exists.')
        return value

    def validate(self, data):
        if not data.get('username'):
            data['username'] = data['email']
        if User.objects.filter(username=data['username']).exists():
            raise serializers.ValidationError({'username': 'A user with this username already exists.'})
        return data

    def create(self, validated_data):
        metadata = {'role': validated_data['role']}
        if validated_data.get('business_name'):
            metadata['business_name'] = validated_data['business_name']
        return User.objects.create_user(
            username=validated_data['username'],
            email=validated_data['email'],
            password=validated_data['password'],
            signup_metadata=metadata,
        )


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField()

    def validate(self, data):
        try:
            user = User.objects.get(email__iexact=data['email'])
        except User.DoesNotExist:
            raise serializers.ValidationError('Invalid credentials')

        if not user.check_password(data['password']):
            raise serializers.ValidationError('Invalid credentials')
        if not user.is_active:
            raise serializers.ValidationError('User account is disabled')
        data['user'] = user
        return data


class LogoutSerializer(serializers.Serializer):
    refresh = serializers.CharField()
